from __future__ import annotations

from typing import Iterable

from .models import normalize_tag

# Interest -> tags that usually satisfy it.  Expansion is one level deep.
INTEREST_TAG_ALIASES: dict[str, list[str]] = {
    # Culture & heritage
    "culture": [
        "heritage", "museum", "art_gallery", "local_crafts",
        "religious_site", "architecture", "history",
    ],
    "heritage": ["culture", "history", "museum"],
    "history": ["heritage", "museum", "culture"],
    "museum": ["culture", "heritage", "art_gallery"],
    "architecture": ["culture", "heritage"],
    # Nature & outdoors
    "nature": [
        "park", "mountain", "waterfall", "forest", "beach",
        "island", "eco_resort", "scenic_view", "lake",
    ],
    "park": ["nature", "scenic_view"],
    "mountain": ["nature", "hiking", "adventure"],
    "beach": ["nature", "island", "relaxation"],
    "island": ["beach", "nature"],
    "lake": ["nature", "relaxation"],
    # Adventure
    "adventure": [
        "activity", "hiking", "surfing", "snorkeling", "diving",
        "zipline", "trekking", "kayaking", "camping",
    ],
    "hiking": ["nature", "adventure"],
    "camping": ["adventure", "nature"],
    # Food
    "foodie": ["restaurant", "local_cuisine", "seafood", "buffet", "street_food"],
    "local_cuisine": ["restaurant", "foodie"],
    "street_food": ["foodie", "market"],
    "cafe": ["foodie", "desserts"],
    # Shopping & urban
    "shopping": ["mall", "market", "souvenir"],
    "mall": ["shopping", "city"],
    "market": ["shopping", "street_food"],
    "city": ["shopping", "nightlife"],
    "nightlife": ["entertainment", "music_events"],
    # Relaxation
    "relaxation": ["resort", "spa", "quiet_place"],
    "spa": ["relaxation", "wellness"],
    "wellness": ["spa"],
    "romantic": ["relaxation", "beach", "cafe"],
    # Family
    "family_friendly": ["park", "pool", "amusement"],
    "kids_activity": ["family_friendly"],
}


def expand_interests(interests: Iterable[str]) -> frozenset[str]:
    """Return *interests* plus their aliases, normalised like place tags."""
    expanded: set[str] = set()
    for interest in interests:
        core = normalize_tag(interest)
        if not core:
            continue
        expanded.add(core)
        expanded.update(INTEREST_TAG_ALIASES.get(core, []))
    return frozenset(expanded)
