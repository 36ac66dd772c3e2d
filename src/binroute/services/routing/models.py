"""Routing domain models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple, Union

from ...models.domain import Coordinate

DecodedRoute = List[Coordinate]


@dataclass(frozen=True, slots=True)
class RouteRequest:
    waypoints: Tuple[Coordinate, ...]


@dataclass(slots=True)
class LegSummary:
    summary: str
    weight: float
    duration: float
    distance: float


@dataclass(slots=True)
class RouteResponse:
    """First route returned by the directions service."""

    encoded_geometry: str
    legs: List[LegSummary] = field(default_factory=list)
    duration: float = 0.0
    distance: float = 0.0


@dataclass(frozen=True, slots=True)
class NoChange:
    kind: str = "no_change"


@dataclass(frozen=True, slots=True)
class Deferred:
    kind: str = "deferred"


@dataclass(frozen=True, slots=True)
class Recompute:
    waypoints: Tuple[Coordinate, ...]
    kind: str = "recompute"


RecomputeDecision = Union[NoChange, Deferred, Recompute]
