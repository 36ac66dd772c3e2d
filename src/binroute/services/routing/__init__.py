"""Route planning services."""

from .directions_client import DirectionsClient, format_coordinates
from .errors import (
    DirectionsUnavailableError,
    InvalidRequestError,
    MalformedEncodingError,
    NoRouteFoundError,
    RoutePlanningError,
    RouteSupersededError,
)
from .models import Deferred, NoChange, Recompute, RecomputeDecision, RouteRequest, RouteResponse
from .polyline import decode_polyline, encode_polyline
from .selector import RouteSelector

__all__ = [
    "DirectionsClient",
    "format_coordinates",
    "RouteSelector",
    "decode_polyline",
    "encode_polyline",
    "RecomputeDecision",
    "NoChange",
    "Deferred",
    "Recompute",
    "RouteRequest",
    "RouteResponse",
    "RoutePlanningError",
    "MalformedEncodingError",
    "InvalidRequestError",
    "DirectionsUnavailableError",
    "NoRouteFoundError",
    "RouteSupersededError",
]
