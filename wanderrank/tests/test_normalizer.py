import logging

import pytest

from wanderrank.scoring.models import IndoorOutdoor, PlaceKind
from wanderrank.scoring.normalizer import normalize_place, normalize_places, price_band


def test_mall_record():
    place = normalize_place({"categories": ["Mall"], "idealCost": 100})
    assert place.kind == PlaceKind.shop
    assert {"mall", "shopping", "indoor"} <= place.tags
    assert place.price_band == 1
    assert place.indoor_outdoor == IndoorOutdoor.indoor


def test_restaurant_wins_over_mall():
    place = normalize_place({"categories": ["Mall", "Restaurant"]})
    assert place.kind == PlaceKind.restaurant


def test_kind_uses_substring_match():
    assert normalize_place({"categories": ["Seafood Restaurant"]}).kind == PlaceKind.restaurant
    assert normalize_place({"categories": ["Beach"]}).kind == PlaceKind.activity


def test_tags_are_lowercased_underscored_and_deduplicated():
    place = normalize_place({"categories": ["Scenic View", "scenic view", "Beach"]})
    assert place.tags == frozenset({"scenic_view", "beach"})
    assert place.indoor_outdoor == IndoorOutdoor.mixed


@pytest.mark.parametrize(
    "cost, band",
    [(0, 1), (149.99, 1), (150, 2), (400, 2), (400.01, 3), (2500, 3)],
)
def test_price_band_thresholds(cost, band):
    assert price_band(cost) == band
    assert normalize_place({"idealCost": cost}).price_band == band


def test_non_numeric_cost_is_budget_band():
    assert normalize_place({"idealCost": "expensive"}).price_band == 1
    assert normalize_place({"idealCost": None}).price_band == 1


def test_oversized_numbers_fall_back_to_defaults():
    huge = 10**400
    place = normalize_place({
        "idealCost": huge,
        "rating": huge,
        "Coordinates": {"latitude": huge, "longitude": -huge},
    })
    assert place.price_band == 1
    assert place.rating == 4.0
    assert (place.lat, place.lng) == (0.0, 0.0)


def test_rating_defaults_when_falsy():
    assert normalize_place({}).rating == 4.0
    assert normalize_place({"rating": 0}).rating == 4.0
    assert normalize_place({"rating": ""}).rating == 4.0
    assert normalize_place({"rating": 3.5}).rating == 3.5


def test_id_fallbacks():
    assert normalize_place({"id": "a", "_id": "b"}).id == "a"
    assert normalize_place({"_id": "b", "docId": "c"}).id == "b"
    assert normalize_place({"docId": 7}).id == "7"
    assert normalize_place({}).id == ""


def test_coordinates():
    place = normalize_place({"Coordinates": {"latitude": 13.75, "longitude": 100.5}})
    assert (place.lat, place.lng) == (13.75, 100.5)
    assert (normalize_place({"Coordinates": "n/a"}).lat, normalize_place({}).lng) == (0.0, 0.0)


def test_empty_record_is_fully_populated():
    place = normalize_place({})
    assert place.name == ""
    assert place.description == ""
    assert place.kind == PlaceKind.activity
    assert place.tags == frozenset()
    assert place.season_best == frozenset({"all"})
    assert place.distance_km == 0.0


def test_malformed_records_do_not_raise(caplog):
    with caplog.at_level(logging.WARNING):
        place = normalize_place(None)
    assert place.id == ""
    assert "not a mapping" in caplog.text

    place = normalize_place({"categories": 42, "rating": "great", "name": None})
    assert place.tags == frozenset()
    assert place.rating == 4.0


def test_normalize_places_keeps_order():
    places = normalize_places([{"id": "1"}, {"id": "2"}, {"id": "3"}])
    assert [p.id for p in places] == ["1", "2", "3"]
