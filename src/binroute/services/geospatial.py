"""Geospatial helper functions."""

from __future__ import annotations

import math
from typing import Sequence

from ..config import settings
from ..models.domain import Bin, Coordinate

EARTH_RADIUS_KM = 6371.0


def haversine_km(a: Coordinate, b: Coordinate) -> float:
    """Compute distance between two coordinates using the Haversine formula."""

    phi1, phi2 = math.radians(a.latitude), math.radians(b.latitude)
    d_phi = math.radians(b.latitude - a.latitude)
    d_lambda = math.radians(b.longitude - a.longitude)

    h = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    # Rounding can push h slightly outside [0, 1] for antipodal or out-of-range input.
    h = min(max(h, 0.0), 1.0)
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
    return EARTH_RADIUS_KM * c


def nearest_bin(position: Coordinate, bins: Sequence[Bin]) -> tuple[Bin, float] | None:
    """Return the closest bin and its distance in km, or None when there are no bins.

    The first bin at the strict minimum wins, so ties resolve to input order.
    """

    closest: Bin | None = None
    shortest = math.inf
    for candidate in bins:
        distance = haversine_km(position, candidate.coordinate)
        if distance < shortest:
            shortest = distance
            closest = candidate
    if closest is None:
        return None
    return closest, shortest


def reachable_bin(
    position: Coordinate,
    bins: Sequence[Bin],
    threshold_km: float | None = None,
) -> Bin | None:
    """Return the nearest bin if the vehicle is close enough to service it."""

    limit = settings.reachable_threshold_km if threshold_km is None else threshold_km
    found = nearest_bin(position, bins)
    if found is None:
        return None
    candidate, distance = found
    return candidate if distance < limit else None
