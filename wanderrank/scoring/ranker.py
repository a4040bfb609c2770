from __future__ import annotations

import logging
from functools import partial
from typing import Callable, Iterable, TypeVar

import pandas as pd

from ..config import DEFAULT_ENGINE_CONFIG, EngineConfig
from .cache import cache_get, cache_set
from .fuzzy import fuzzy_score
from .legacy import legacy_score
from .models import LegacyDestination, Place, ScoredPlace, ScoringStrategy, User

logger = logging.getLogger(__name__)

T = TypeVar("T")


def rank(candidates: Iterable[T], scorer: Callable[[T], ScoredPlace]) -> list[ScoredPlace]:
    """Score every candidate and sort descending; ties keep their input order."""
    scored = [scorer(c) for c in candidates]
    if not scored:
        return []
    frame = pd.DataFrame({"score": [s.score for s in scored]})
    order = frame.sort_values("score", ascending=False, kind="stable").index
    return [scored[i] for i in order]


def _place_fingerprint(place: Place) -> dict:
    data = place.model_dump(mode="json")
    data["tags"] = sorted(place.tags)
    data["season_best"] = sorted(place.season_best)
    return data


def _cached_rank(
    key_dict: dict,
    compute: Callable[[], list[ScoredPlace]],
    config: EngineConfig,
) -> list[ScoredPlace]:
    if not config.cache_enabled:
        return compute()

    cached = cache_get(key_dict, ttl=config.cache_ttl)
    if cached is not None:
        logger.debug("Ranking cache hit (%s)", key_dict["strategy"])
        return list(cached)

    ranked = compute()
    cache_set(key_dict, tuple(ranked), max_entries=config.cache_max_entries)
    return ranked


def rank_places(
    places: list[Place],
    user: User,
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> list[ScoredPlace]:
    """Rank canonical places with the weighted fuzzy strategy (scores 0-1)."""
    key_dict = {
        "strategy": ScoringStrategy.weighted_fuzzy.value,
        "candidates": [_place_fingerprint(p) for p in places],
        "user": {
            "budget": user.budget,
            "interests": sorted(user.interests),
            "season": user.season.value,
            "weather": user.weather,
        },
    }
    return _cached_rank(key_dict, lambda: rank(places, partial(fuzzy_score, user)), config)


def rank_destinations(
    destinations: list[LegacyDestination],
    interest: str,
    config: EngineConfig = DEFAULT_ENGINE_CONFIG,
) -> list[ScoredPlace]:
    """Rank destinations with the legacy crisp strategy (scores 0-10)."""
    key_dict = {
        "strategy": ScoringStrategy.legacy_crisp.value,
        "candidates": [d.model_dump(mode="json") for d in destinations],
        "interest": interest,
    }
    return _cached_rank(
        key_dict, lambda: rank(destinations, partial(legacy_score, interest)), config,
    )
