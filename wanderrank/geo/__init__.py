"""
Distance helpers.

Responsibilities:
- Great-circle distances between a traveler origin and canonical places.
- Compact distance labels for display.
"""
