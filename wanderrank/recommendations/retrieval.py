from __future__ import annotations

import logging
import time
from typing import Any

from ..analytics.store import record_event
from ..geo.distance import attach_distances, format_km
from ..scoring.aliases import expand_interests
from ..scoring.models import LegacyDestination, Place, ScoredPlace, ScoringStrategy
from ..scoring.normalizer import normalize_places
from ..scoring.ranker import rank_destinations, rank_places
from .models import (
    LegacyRecommendationRequest,
    RecommendationItem,
    RecommendationRequest,
    RecommendationResponse,
)

logger = logging.getLogger(__name__)


def _place_out(place: Place) -> dict[str, Any]:
    data = place.model_dump(mode="json")
    data["tags"] = sorted(place.tags)
    data["season_best"] = sorted(place.season_best)
    return data


def _item(scored: ScoredPlace) -> RecommendationItem:
    if isinstance(scored.place, Place):
        return RecommendationItem(
            place=_place_out(scored.place),
            score=round(scored.score, 4),
            reasons=list(scored.reasons),
            distance_label=format_km(scored.place.distance_km),
        )
    return RecommendationItem(
        place=scored.place.model_dump(mode="json"),
        score=round(scored.score, 4),
        reasons=list(scored.reasons),
    )


def get_recommendations(request: RecommendationRequest) -> RecommendationResponse:
    start_time = time.time()

    places = normalize_places(request.places)
    if request.origin is None and not request.distances_km and places:
        logger.warning("No origin or distances supplied; places without a distance are unreachable")
    places = attach_distances(places, origin=request.origin, distances_km=request.distances_km)

    user = request.user
    if request.expand_aliases:
        user = user.model_copy(update={"interests": expand_interests(user.interests)})

    ranked = rank_places(places, user)
    top = ranked[: request.limit]

    strategy = ScoringStrategy.weighted_fuzzy
    response = RecommendationResponse(
        recommendations=[_item(s) for s in top],
        total_candidates=len(places),
        strategy=strategy,
        score_range=strategy.score_range,
    )

    elapsed_ms = round((time.time() - start_time) * 1000, 1)
    record_event("search", {
        "strategy": strategy.value,
        "interests": sorted(request.user.interests),
        "expand_aliases": request.expand_aliases,
        "total_candidates": len(places),
        "results_returned": len(top),
        "reasons": [r for s in top for r in s.reasons],
        "response_time_ms": elapsed_ms,
    })
    return response


def get_legacy_recommendations(request: LegacyRecommendationRequest) -> RecommendationResponse:
    start_time = time.time()

    destinations = [LegacyDestination.model_validate(d) for d in request.destinations]
    ranked = rank_destinations(destinations, request.interest)
    top = ranked[: request.limit]

    strategy = ScoringStrategy.legacy_crisp
    response = RecommendationResponse(
        recommendations=[_item(s) for s in top],
        total_candidates=len(destinations),
        strategy=strategy,
        score_range=strategy.score_range,
    )

    elapsed_ms = round((time.time() - start_time) * 1000, 1)
    record_event("search", {
        "strategy": strategy.value,
        "interests": [request.interest] if request.interest else [],
        "total_candidates": len(destinations),
        "results_returned": len(top),
        "reasons": [],
        "response_time_ms": elapsed_ms,
    })
    return response
