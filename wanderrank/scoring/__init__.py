"""
Fuzzy destination scoring engine.

Responsibilities:
- Normalise loosely shaped place records into canonical ``Place`` values.
- Evaluate fuzzy memberships and weighted rules for a (traveler, place) pair.
- Keep the crisp 0-10 scorer available as an alternate strategy.
- Rank candidate sets by score, memoising repeated rankings.
"""
