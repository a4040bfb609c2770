"""
Crisp-threshold destination scorer on a 0-10 scale.

Budget is in currency units and popularity on 0-10.  The first matching
band pair (high/high, then mid/mid, then low/low) sets the base score; any
non-zero membership opens the gate, and the larger of the two degrees scales
the band's base value.
"""
from __future__ import annotations

from .membership import trapezoid, triangle
from .models import LegacyDestination, ScoredPlace, ScoringStrategy

MAX_SCORE = 10.0

LOW_BUDGET = trapezoid(0, 0, 1500, 3000)
MEDIUM_BUDGET = triangle(2000, 5000, 8000)
HIGH_BUDGET = trapezoid(6000, 9000, 12000, 12000)

LOW_POPULARITY = trapezoid(0, 0, 1, 4)
MEDIUM_POPULARITY = triangle(2, 5, 8)
HIGH_POPULARITY = trapezoid(6, 8, 10, 10)

NATURE_BONUS = 1.0
RELAXATION_BONUS = 0.5


def evaluate_destination(budget: float, popularity: float, interest: str, category: str) -> float:
    low_budget = LOW_BUDGET(budget)
    medium_budget = MEDIUM_BUDGET(budget)
    high_budget = HIGH_BUDGET(budget)

    low_pop = LOW_POPULARITY(popularity)
    medium_pop = MEDIUM_POPULARITY(popularity)
    high_pop = HIGH_POPULARITY(popularity)

    suitability = 0.0
    if high_budget and high_pop:
        suitability = max(high_budget, high_pop) * 9
    elif medium_budget and medium_pop:
        suitability = max(medium_budget, medium_pop) * 7
    elif low_budget and low_pop:
        suitability = max(low_budget, low_pop) * 3

    if interest == "Nature" and category == "Nature" and high_pop:
        suitability += NATURE_BONUS
    if interest == "Relaxation" and category == "Relaxation" and low_pop:
        suitability += RELAXATION_BONUS

    return min(MAX_SCORE, suitability)


def legacy_score(interest: str, destination: LegacyDestination) -> ScoredPlace:
    return ScoredPlace(
        place=destination,
        score=evaluate_destination(
            destination.budget, destination.popularity, interest, destination.category,
        ),
        strategy=ScoringStrategy.legacy_crisp,
    )
