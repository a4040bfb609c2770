from __future__ import annotations

import logging
import math
from typing import Any, Iterable, Mapping

from .models import IndoorOutdoor, Place, PlaceKind, normalize_tag

logger = logging.getLogger(__name__)

# idealCost thresholds for price bands 1 / 2 / 3
BUDGET_CEILING = 150
MID_CEILING = 400
DEFAULT_RATING = 4.0


def _number(value: Any, field: str) -> float:
    """Return *value* as a finite float, defaulting to 0.0."""
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        logger.debug("Non-numeric %s %r, defaulting to 0", field, value)
        return 0.0
    try:
        number = float(value)
    except OverflowError:
        number = math.nan
    if not math.isfinite(number):
        logger.debug("Non-finite %s %r, defaulting to 0", field, value)
        return 0.0
    return number


def _categories(raw: Mapping[str, Any]) -> list[str]:
    cats = raw.get("categories") or []
    if isinstance(cats, str):
        cats = [cats]
    elif not isinstance(cats, (list, tuple, set, frozenset)):
        logger.debug("Unexpected categories value %r, ignoring", cats)
        return []
    return [str(c).strip().lower() for c in cats if c is not None and str(c).strip()]


def _kind(cats: list[str]) -> PlaceKind:
    if any("restaurant" in c for c in cats):
        return PlaceKind.restaurant
    if any("mall" in c for c in cats):
        return PlaceKind.shop
    return PlaceKind.activity


def price_band(ideal_cost: float) -> int:
    """Bucket a raw cost figure into 1 (budget), 2 (mid) or 3 (premium)."""
    if ideal_cost < BUDGET_CEILING:
        return 1
    if ideal_cost <= MID_CEILING:
        return 2
    return 3


def _coordinates(raw: Mapping[str, Any]) -> tuple[float, float]:
    coords = raw.get("Coordinates")
    if not isinstance(coords, Mapping):
        return 0.0, 0.0
    return (
        _number(coords.get("latitude"), "latitude"),
        _number(coords.get("longitude"), "longitude"),
    )


def _rating(value: Any) -> float:
    rating = _number(value, "rating")
    return rating if rating else DEFAULT_RATING


def normalize_place(raw: Mapping[str, Any] | None) -> Place:
    """Convert a loosely shaped place record into a canonical ``Place``.

    Never raises: missing or malformed fields fall back to their defaults.
    ``distance_km`` is left at 0 for the caller to fill in.
    """
    if not isinstance(raw, Mapping):
        logger.warning("Place record is not a mapping (%s), using defaults", type(raw).__name__)
        raw = {}

    cats = _categories(raw)
    has_mall = "mall" in cats

    tags = {normalize_tag(c) for c in cats}
    if has_mall:
        tags.update({"shopping", "indoor"})

    lat, lng = _coordinates(raw)
    place_id = raw.get("id") or raw.get("_id") or raw.get("docId") or ""

    return Place(
        id=str(place_id),
        name=str(raw.get("name") or ""),
        description=str(raw.get("description") or ""),
        lat=lat,
        lng=lng,
        kind=_kind(cats),
        tags=frozenset(tags),
        price_band=price_band(_number(raw.get("idealCost"), "idealCost")),
        indoor_outdoor=IndoorOutdoor.indoor if has_mall else IndoorOutdoor.mixed,
        season_best=frozenset({"all"}),
        rating=_rating(raw.get("rating")),
    )


def normalize_places(records: Iterable[Mapping[str, Any]]) -> list[Place]:
    return [normalize_place(r) for r in records]
