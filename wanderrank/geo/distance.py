from __future__ import annotations

import logging
import math
from typing import Any, Mapping

import numpy as np

from ..scoring.models import UNREACHABLE_KM, Coordinates, Place

logger = logging.getLogger(__name__)

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1, lon1, lat2, lon2):
    """Great-circle distance in kilometres.  Accepts scalars or numpy arrays."""
    lat1, lon1, lat2, lon2 = map(np.radians, (lat1, lon1, lat2, lon2))
    dlat = lat2 - lat1
    dlon = lon2 - lon1
    a = np.sin(dlat / 2) ** 2 + np.cos(lat1) * np.cos(lat2) * np.sin(dlon / 2) ** 2
    result = EARTH_RADIUS_KM * 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))
    return float(result) if np.ndim(result) == 0 else result


def _has_location(lat: float, lng: float) -> bool:
    # Normalised places without coordinates sit at (0, 0).
    return bool(lat or lng)


def km_from_origin(place: Place, origin: Coordinates | None) -> float:
    if origin is None or not _has_location(place.lat, place.lng):
        logger.warning("Missing coordinates for distance to place %r", place.id or place.name)
        return UNREACHABLE_KM
    dist = haversine_km(origin.latitude, origin.longitude, place.lat, place.lng)
    return dist if math.isfinite(dist) else UNREACHABLE_KM


def distances_from_origin(places: list[Place], origin: Coordinates) -> list[float]:
    """Vectorised ``km_from_origin`` over a batch of places."""
    if not places:
        return []
    lats = np.array([p.lat for p in places], dtype=float)
    lngs = np.array([p.lng for p in places], dtype=float)
    dists = np.asarray(haversine_km(origin.latitude, origin.longitude, lats, lngs), dtype=float)
    located = (lats != 0) | (lngs != 0)
    dists = np.where(located & np.isfinite(dists), dists, UNREACHABLE_KM)
    return dists.tolist()


def format_km(km: Any) -> str:
    """Metres below 1 km, one decimal otherwise."""
    if km is None:
        return "—"
    try:
        km = float(km)
    except (TypeError, ValueError):
        return "—"
    if math.isnan(km):
        return "—"
    return f"{round(km * 1000)} m" if km < 1 else f"{km:.1f} km"


def attach_distances(
    places: list[Place],
    origin: Coordinates | None = None,
    distances_km: Mapping[str, float] | None = None,
) -> list[Place]:
    """Return copies of *places* with ``distance_km`` filled in.

    Explicit per-id distances win over distances computed from *origin*.
    Places with neither are placed at ``UNREACHABLE_KM``.
    """
    computed = distances_from_origin(places, origin) if origin is not None else None
    result: list[Place] = []
    for i, place in enumerate(places):
        if distances_km and place.id in distances_km:
            result.append(place.at_distance(distances_km[place.id]))
        elif computed is not None:
            result.append(place.at_distance(computed[i]))
        else:
            result.append(place.at_distance(UNREACHABLE_KM))
    return result
