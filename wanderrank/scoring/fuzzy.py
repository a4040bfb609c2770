"""
Weighted-rule fuzzy scorer.

Scoring runs in three steps:

1. **Fuzzify**: map the traveler's budget and weather, the place's distance
   and the interest overlap onto their linguistic labels (low / mid / high,
   poor / fair / great, near / moderate / far, none / partial / strong).
2. **Aggregate**: each rule fires with weight ``min(applicable degrees)`` and
   contributes ``weight * confidence`` to a weighted average.  Rules that do
   not fire add no weight, so they never drag the average down.
3. **Explain**: a fixed sequence of guards turns strong memberships into short
   human-readable reasons.

Scores are always in ``[0, 1]``.
"""
from __future__ import annotations

from typing import Any

from .membership import clamp01, trapezoid, triangle
from .models import IndoorOutdoor, Memberships, Place, ScoredPlace, ScoringStrategy, User
from .similarity import jaccard

HIGH = 0.9
MED = 0.6
LOW = 0.3
VLOW = 0.1

RATING_WEIGHT = 0.2

BUDGET_LOW = trapezoid(0, 0, 0.15, 0.4)
BUDGET_MID = triangle(0.3, 0.5, 0.7)
BUDGET_HIGH = trapezoid(0.6, 0.85, 1, 1)

WEATHER_POOR = trapezoid(0, 0.2, 0.2, 0.45)
WEATHER_FAIR = triangle(0.35, 0.55, 0.75)
WEATHER_GREAT = trapezoid(0.6, 0.85, 1, 1)

DISTANCE_NEAR = trapezoid(0, 0, 0.8, 1.6)
DISTANCE_MODERATE = triangle(1, 2.5, 4.5)
DISTANCE_FAR = triangle(3.5, 6, 8)

INTEREST_NONE = triangle(0, 0, 0.2)
INTEREST_PARTIAL = triangle(0.15, 0.45, 0.75)
INTEREST_STRONG = trapezoid(0.6, 0.85, 1, 1)

_CRISP_FIT = {
    IndoorOutdoor.indoor: (1.0, 0.0),
    IndoorOutdoor.outdoor: (0.0, 1.0),
    IndoorOutdoor.mixed: (0.5, 0.5),
}


def compute_memberships(user: User, place: Place) -> Memberships:
    interest = jaccard(user.interests, place.tags)
    indoor, outdoor = _CRISP_FIT[place.indoor_outdoor]
    in_season = "all" in place.season_best or user.season.value in place.season_best

    return Memberships(
        budget_low=BUDGET_LOW(user.budget),
        budget_mid=BUDGET_MID(user.budget),
        budget_high=BUDGET_HIGH(user.budget),
        weather_poor=WEATHER_POOR(user.weather),
        weather_fair=WEATHER_FAIR(user.weather),
        weather_great=WEATHER_GREAT(user.weather),
        near=DISTANCE_NEAR(place.distance_km),
        moderate=DISTANCE_MODERATE(place.distance_km),
        far=DISTANCE_FAR(place.distance_km),
        interest=interest,
        interest_none=INTEREST_NONE(interest),
        interest_partial=INTEREST_PARTIAL(interest),
        interest_strong=INTEREST_STRONG(interest),
        indoor=indoor,
        outdoor=outdoor,
        season_fit=1.0 if in_season else 0.5,
    )


def rule_activations(m: Memberships, place: Place) -> list[tuple[str, float, float]]:
    """Return ``(rule, weight, confidence)`` for every rule in evaluation order."""
    band = place.price_band
    rules = [
        ("low budget, budget place", min(m.budget_low, 1.0 if band == 1 else 0.0), HIGH),
        ("high budget, premium place", min(m.budget_high, 1.0 if band == 3 else 0.0), HIGH),
        ("strong interest", m.interest_strong, HIGH),
        ("partial interest", m.interest_partial, MED),
        ("near", m.near, HIGH),
        ("far, great weather", min(m.far, m.weather_great), MED),
        ("poor weather, indoor", min(m.weather_poor, m.indoor), HIGH),
        ("great weather, outdoor", min(m.weather_great, m.outdoor), HIGH),
        ("in season", m.season_fit, MED),
        ("low budget, pricier place", min(m.budget_low, 1.0 if band >= 2 else 0.0), LOW),
        ("far, poor weather", min(m.far, m.weather_poor), VLOW),
    ]
    if place.rating is not None:
        # The rating rule's "confidence" is the normalised rating itself.
        rules.append(("rating", RATING_WEIGHT, clamp01(place.rating / 5)))
    return rules


def aggregate(rules: list[tuple[str, float, float]]) -> float:
    numerator = 0.0
    denominator = 0.0
    for _, weight, confidence in rules:
        numerator += weight * confidence
        denominator += weight
    return numerator / denominator if denominator > 0 else 0.0


def explain_reasons(m: Memberships, place: Place) -> tuple[str, ...]:
    reasons: list[str] = []
    if m.interest_strong > 0.5:
        reasons.append("Strong interest match")
    elif m.interest_partial > 0.5:
        reasons.append("Partial interest match")
    if m.near > 0.5:
        reasons.append("Near")
    if m.weather_great > 0.5 and m.outdoor > 0.5:
        reasons.append("Outdoor & good weather")
    if m.weather_poor > 0.5 and m.indoor > 0.5:
        reasons.append("Indoor & poor weather")
    if m.season_fit > 0.7:
        reasons.append("Good for this season")
    if m.budget_low > 0.6 and place.price_band == 1:
        reasons.append("Fits low budget")
    if m.budget_high > 0.6 and place.price_band == 3:
        reasons.append("Premium option")
    return tuple(reasons)


def fuzzy_score(user: User, place: Place) -> ScoredPlace:
    """Score *place* for *user*.  ``place.distance_km`` must already be set."""
    m = compute_memberships(user, place)
    score = aggregate(rule_activations(m, place))
    return ScoredPlace(
        place=place,
        score=score,
        reasons=explain_reasons(m, place),
        strategy=ScoringStrategy.weighted_fuzzy,
    )


def explain_place(user: User, place: Place) -> dict[str, Any]:
    """Full breakdown of a fuzzy score, for "why this place" views."""
    m = compute_memberships(user, place)
    rules = rule_activations(m, place)
    return {
        "place": place.name or place.id,
        "distance_km": round(place.distance_km, 2),
        "memberships": {k: round(v, 3) for k, v in m.model_dump().items()},
        "rules": [
            {"rule": name, "weight": round(w, 3), "confidence": round(c, 3)}
            for name, w, c in rules
            if w > 0
        ],
        "reasons": list(explain_reasons(m, place)),
        "score": round(aggregate(rules), 4),
    }
