from __future__ import annotations

import math
import re
from enum import Enum
from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

_WHITESPACE = re.compile(r"\s+")

# Distance given to places that cannot be located
UNREACHABLE_KM = 9999.0

# Top of the legacy scorer's budget and popularity scales
LEGACY_CEILINGS = {"budget": 12000.0, "popularity": 10.0}


def normalize_tag(value: Any) -> str:
    """Lower-case *value* and replace whitespace runs with underscores."""
    return _WHITESPACE.sub("_", str(value).strip().lower())


def normalize_tags(values: Iterable[Any]) -> frozenset[str]:
    return frozenset(t for t in (normalize_tag(v) for v in values) if t)


def finite_distance(value: Any) -> Any:
    """Map a non-finite or overflowing distance to ``UNREACHABLE_KM``.

    Values that are not numbers are returned unchanged for validation to reject.
    """
    if isinstance(value, bool):
        return value
    try:
        km = float(value)
    except OverflowError:
        return UNREACHABLE_KM
    except (TypeError, ValueError):
        return value
    return km if math.isfinite(km) else UNREACHABLE_KM


class PlaceKind(str, Enum):
    restaurant = "restaurant"
    shop = "shop"
    activity = "activity"


class IndoorOutdoor(str, Enum):
    indoor = "indoor"
    outdoor = "outdoor"
    mixed = "mixed"


class Season(str, Enum):
    dry = "dry"
    wet = "wet"


class ScoringStrategy(str, Enum):
    """Scoring variants.  Scores from different variants are not comparable."""

    weighted_fuzzy = "weighted_fuzzy"
    legacy_crisp = "legacy_crisp"

    @property
    def score_range(self) -> tuple[float, float]:
        if self is ScoringStrategy.legacy_crisp:
            return (0.0, 10.0)
        return (0.0, 1.0)


class Coordinates(BaseModel):
    latitude: float
    longitude: float


class Place(BaseModel):
    """Canonical destination, as produced by ``normalize_place``."""

    model_config = ConfigDict(frozen=True)

    id: str = ""
    name: str = ""
    description: str = ""
    lat: float = 0.0
    lng: float = 0.0
    kind: PlaceKind = PlaceKind.activity
    tags: frozenset[str] = frozenset()
    price_band: int = Field(default=1, ge=1, le=3)
    indoor_outdoor: IndoorOutdoor = IndoorOutdoor.mixed
    season_best: frozenset[str] = frozenset({"all"})
    rating: float | None = 4.0
    # Depends on where the traveler is, so it is attached by the caller.
    distance_km: float = Field(default=0.0, ge=0.0)

    @field_validator("distance_km", mode="before")
    @classmethod
    def _finite_distance(cls, value: Any) -> Any:
        return finite_distance(value)

    def at_distance(self, distance_km: float) -> Place:
        """Return a copy of this place located *distance_km* from the traveler."""
        km = finite_distance(distance_km)
        if not isinstance(km, float):
            km = UNREACHABLE_KM
        return self.model_copy(update={"distance_km": max(0.0, km)})


class User(BaseModel):
    """Traveler preference snapshot for a single scoring call."""

    model_config = ConfigDict(frozen=True)

    budget: float = Field(default=0.5, ge=0.0, le=1.0)
    interests: frozenset[str] = frozenset()
    pref_distance_km: float = Field(default=5.0, ge=0.0)
    season: Season = Season.dry
    weather: float = Field(default=0.5, ge=0.0, le=1.0)

    @field_validator("interests", mode="before")
    @classmethod
    def _normalize_interests(cls, value: Any) -> frozenset[str]:
        if value is None:
            return frozenset()
        if isinstance(value, str):
            value = [value]
        return normalize_tags(value)


class LegacyDestination(BaseModel):
    """Destination shape read by the crisp 0-10 scorer."""

    model_config = ConfigDict(frozen=True)

    id: str = ""
    name: str = ""
    budget: float = 0.0
    popularity: float = 0.0
    category: str = ""

    @field_validator("budget", "popularity", mode="before")
    @classmethod
    def _numeric_or_zero(cls, value: Any, info: ValidationInfo) -> float:
        if isinstance(value, bool):
            return 0.0
        try:
            number = float(value)
        except OverflowError:
            number = math.inf if value > 0 else -math.inf
        except (TypeError, ValueError):
            return 0.0
        if math.isnan(number):
            return 0.0
        # Out-of-range magnitudes sit at the ends of the scale
        if number == math.inf:
            return LEGACY_CEILINGS[info.field_name]
        if number == -math.inf:
            return 0.0
        return number

    @field_validator("id", "name", "category", mode="before")
    @classmethod
    def _text_or_empty(cls, value: Any) -> str:
        return "" if value is None else str(value)


class Memberships(BaseModel):
    """Every degree the fuzzy scorer evaluates for one (user, place) pair."""

    model_config = ConfigDict(frozen=True)

    budget_low: float
    budget_mid: float
    budget_high: float
    weather_poor: float
    weather_fair: float
    weather_great: float
    near: float
    moderate: float
    far: float
    interest: float
    interest_none: float
    interest_partial: float
    interest_strong: float
    indoor: float
    outdoor: float
    season_fit: float


class ScoredPlace(BaseModel):
    model_config = ConfigDict(frozen=True)

    place: Place | LegacyDestination
    score: float
    reasons: tuple[str, ...] = ()
    strategy: ScoringStrategy = ScoringStrategy.weighted_fuzzy
