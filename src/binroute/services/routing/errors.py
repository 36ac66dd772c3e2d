"""Errors raised while planning a collection route."""

from __future__ import annotations


class RoutePlanningError(Exception):
    """Base class for route planning failures."""


class MalformedEncodingError(RoutePlanningError, ValueError):
    """The encoded polyline ended in the middle of a value or holds invalid characters."""


class InvalidRequestError(RoutePlanningError, ValueError):
    """A directions request was built without any waypoints."""


class DirectionsUnavailableError(RoutePlanningError, ConnectionError):
    """The directions service could not be reached, timed out or answered with an error."""


class NoRouteFoundError(RoutePlanningError):
    """The directions service answered but returned no route."""


class RouteSupersededError(RoutePlanningError):
    """A newer route fetch replaced this one before it completed."""

    def __init__(self, sequence: int, latest: int) -> None:
        super().__init__(f"Route request #{sequence} was superseded by request #{latest}.")
        self.sequence = sequence
        self.latest = latest
