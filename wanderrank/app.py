from __future__ import annotations

from typing import Any

from fastapi import FastAPI

from .analytics.aggregator import compute_analytics
from .analytics.store import get_events
from .recommendations.models import (
    ExplainRequest,
    LegacyRecommendationRequest,
    RecommendationRequest,
    RecommendationResponse,
)
from .recommendations.retrieval import get_legacy_recommendations, get_recommendations
from .scoring.cache import get_cache_stats
from .scoring.fuzzy import explain_place
from .scoring.normalizer import normalize_place

app = FastAPI(title="Destination Recommendation API", version="1.0.0")


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


# ── Ranking endpoints ────────────────────────────────────────────────────


@app.post("/recommendations", response_model=RecommendationResponse)
def recommendations(body: RecommendationRequest) -> RecommendationResponse:
    return get_recommendations(body)


@app.post("/recommendations/legacy", response_model=RecommendationResponse)
def legacy_recommendations(body: LegacyRecommendationRequest) -> RecommendationResponse:
    return get_legacy_recommendations(body)


@app.post("/explain")
def explain(body: ExplainRequest) -> dict[str, Any]:
    place = normalize_place(body.place).at_distance(body.distance_km)
    return explain_place(body.user, place)


# ── Diagnostics ──────────────────────────────────────────────────────────


@app.get("/analytics")
def analytics() -> dict:
    return compute_analytics(get_events())


@app.get("/cache/stats")
def cache_stats() -> dict:
    return get_cache_stats()
