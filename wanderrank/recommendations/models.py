from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from ..scoring.models import Coordinates, ScoringStrategy, User


class RecommendationRequest(BaseModel):
    user: User
    places: list[dict[str, Any]] = Field(
        default_factory=list,
        description="Raw place records in whatever shape the catalogue stores them",
    )
    distances_km: dict[str, float] = Field(
        default_factory=dict,
        description="Distance from the traveler per place id",
    )
    origin: Coordinates | None = Field(
        default=None,
        description="Traveler location, used for places missing from distances_km",
    )
    expand_aliases: bool = False
    limit: int = Field(default=20, ge=1, le=100)


class LegacyRecommendationRequest(BaseModel):
    interest: str = ""
    destinations: list[dict[str, Any]] = Field(default_factory=list)
    limit: int = Field(default=20, ge=1, le=100)


class ExplainRequest(BaseModel):
    user: User
    place: dict[str, Any]
    distance_km: float = Field(default=0.0, ge=0.0)


class RecommendationItem(BaseModel):
    place: dict[str, Any]
    score: float
    reasons: list[str] = Field(default_factory=list)
    distance_label: str | None = None


class RecommendationResponse(BaseModel):
    recommendations: list[RecommendationItem]
    total_candidates: int
    strategy: ScoringStrategy
    score_range: tuple[float, float]
