from __future__ import annotations

from unittest.mock import patch

from wanderrank.config import EngineConfig
from wanderrank.scoring.cache import clear_cache, get_cache_stats
from wanderrank.scoring.models import LegacyDestination, Place, ScoredPlace, User
from wanderrank.scoring.ranker import rank, rank_destinations, rank_places

USER = User(budget=0.9, weather=0.8, interests={"nature"})


def _places() -> list[Place]:
    return [
        Place(id="far", tags={"nature"}, distance_km=12, price_band=3),
        Place(id="near", tags={"nature"}, distance_km=0.4, price_band=3, indoor_outdoor="outdoor"),
        Place(id="mall", tags={"mall", "shopping", "indoor"}, distance_km=2, indoor_outdoor="indoor"),
    ]


def test_rank_sorts_descending():
    ranked = rank_places(_places(), USER, config=EngineConfig(cache_enabled=False))
    scores = [r.score for r in ranked]
    assert scores == sorted(scores, reverse=True)
    assert ranked[0].place.id == "near"


def test_rank_is_stable_for_ties():
    items = ["a", "b", "c", "d"]
    scores = {"a": 0.5, "b": 0.9, "c": 0.5, "d": 0.5}
    ranked = rank(items, lambda i: ScoredPlace(place=Place(id=i), score=scores[i]))
    assert [r.place.id for r in ranked] == ["b", "a", "c", "d"]


def test_rank_empty():
    assert rank([], lambda p: ScoredPlace(place=p, score=0)) == []
    assert rank_places([], USER) == []


def test_rank_places_is_memoised():
    clear_cache()
    first = rank_places(_places(), USER)
    with patch("wanderrank.scoring.ranker.fuzzy_score") as mock_score:
        second = rank_places(_places(), USER)
        mock_score.assert_not_called()
    assert first == second
    stats = get_cache_stats()
    assert stats["hits"] == 1
    assert stats["misses"] == 1


def test_interest_change_invalidates_cached_ranking():
    clear_cache()
    rank_places(_places(), USER)
    other = USER.model_copy(update={"interests": frozenset({"shopping"})})
    ranked = rank_places(_places(), other)
    assert get_cache_stats()["hits"] == 0
    assert ranked[0].place.id in {"near", "mall"}


def test_interest_order_shares_cache_entry():
    clear_cache()
    rank_places(_places(), User(interests=["nature", "beach"]))
    rank_places(_places(), User(interests=["beach", "nature"]))
    assert get_cache_stats()["hits"] == 1


def test_candidate_change_invalidates_cached_ranking():
    clear_cache()
    rank_places(_places(), USER)
    rank_places(_places()[:2], USER)
    assert get_cache_stats()["misses"] == 2


def test_cache_disabled_always_recomputes():
    clear_cache()
    config = EngineConfig(cache_enabled=False)
    rank_places(_places(), USER, config=config)
    rank_places(_places(), USER, config=config)
    assert get_cache_stats()["hits"] == 0
    assert get_cache_stats()["size"] == 0


def test_rank_destinations_legacy_scale():
    clear_cache()
    destinations = [
        LegacyDestination(id="city", budget=5000, popularity=5, category="Culture"),
        LegacyDestination(id="park", budget=9500, popularity=9, category="Nature"),
        LegacyDestination(id="spa", budget=1000, popularity=0.5, category="Relaxation"),
    ]
    ranked = rank_destinations(destinations, "Nature")
    assert [r.place.id for r in ranked] == ["park", "city", "spa"]
    assert ranked[0].score == 10


def test_legacy_ranking_cached_per_interest():
    clear_cache()
    destinations = [LegacyDestination(id="spa", budget=1000, popularity=0.5, category="Relaxation")]
    assert rank_destinations(destinations, "Relaxation")[0].score == 3.5
    assert rank_destinations(destinations, "Nature")[0].score == 3.0
    assert get_cache_stats()["misses"] == 2
