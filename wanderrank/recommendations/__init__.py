"""
Recommendation service layer.

Responsibilities:
- Accept a traveler snapshot and raw destination records.
- Normalise records and attach distances from the traveler.
- Rank candidates with the requested scoring strategy.
- Return structured recommendations ready for API serialisation.
"""
