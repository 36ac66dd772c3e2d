"""HTTP client for the directions service."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Sequence

import httpx

from ...config import COORDINATES_PLACEHOLDER, settings
from ...models.domain import Coordinate
from .errors import DirectionsUnavailableError, InvalidRequestError, NoRouteFoundError
from .models import LegSummary, RouteResponse

logger = logging.getLogger(__name__)

# Two points in Berlin, used to probe the service without depending on local data.
HEALTH_CHECK_WAYPOINTS = (
    Coordinate(latitude=52.517037, longitude=13.388860),
    Coordinate(latitude=52.496891, longitude=13.385983),
)


def format_coordinates(waypoints: Sequence[Coordinate]) -> str:
    """Convert waypoints to the directions format 'lon,lat;lon,lat;...'"""
    return ";".join(f"{point.longitude},{point.latitude}" for point in waypoints)


def _parse_leg(raw: Any) -> LegSummary:
    if not isinstance(raw, dict):
        return LegSummary(summary="", weight=0.0, duration=0.0, distance=0.0)
    return LegSummary(
        summary=str(raw.get("summary") or ""),
        weight=float(raw.get("weight") or 0.0),
        duration=float(raw.get("duration") or 0.0),
        distance=float(raw.get("distance") or 0.0),
    )


def parse_route_response(data: Any) -> RouteResponse:
    """Project a directions JSON body onto its first route.

    The route service answers with ``routes``; the trip service with ``trips``.
    """
    if not isinstance(data, dict):
        raise DirectionsUnavailableError("Directions response is not a JSON object.")

    routes = data.get("routes")
    if routes is None:
        routes = data.get("trips")
    if routes is not None and not isinstance(routes, list):
        raise DirectionsUnavailableError("Directions response has no route list.")
    if not routes:
        message = data.get("message") or data.get("code") or "empty route list"
        raise NoRouteFoundError(f"Directions service returned no route: {message}")

    first = routes[0]
    geometry = first.get("geometry") if isinstance(first, dict) else None
    if not isinstance(geometry, str):
        raise DirectionsUnavailableError("First route has no polyline geometry.")
    legs = first.get("legs") or []
    if not isinstance(legs, list):
        raise DirectionsUnavailableError("First route has a malformed leg list.")

    return RouteResponse(
        encoded_geometry=geometry,
        legs=[_parse_leg(leg) for leg in legs],
        duration=float(first.get("duration") or 0.0),
        distance=float(first.get("distance") or 0.0),
    )


class DirectionsClient:
    def __init__(
        self,
        url_template: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.url_template = url_template or settings.directions_url_template
        if COORDINATES_PLACEHOLDER not in self.url_template:
            raise ValueError(f"Directions URL template is missing {COORDINATES_PLACEHOLDER}.")
        self.timeout = timeout if timeout is not None else settings.directions_timeout_seconds
        self._transport = transport

    def _get_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout),
            transport=self._transport,
        )

    def build_url(self, waypoints: Sequence[Coordinate]) -> str:
        return self.url_template.replace(COORDINATES_PLACEHOLDER, format_coordinates(waypoints))

    async def _get_json(self, url: str) -> Any:
        async with self._get_client() as client:
            response = await client.get(url)
            response.raise_for_status()
            return response.json()

    async def route(self, waypoints: Sequence[Coordinate]) -> RouteResponse:
        """Request a route through ``waypoints`` in order and return its first route.

        No retries are made here; callers re-trigger on the next bin snapshot.
        """
        if len(waypoints) < 1:
            raise InvalidRequestError("At least one waypoint is required for a directions request.")

        url = self.build_url(waypoints)
        logger.debug(f"Requesting directions for {len(waypoints)} waypoints: {url}")
        try:
            # httpx timeouts apply per phase; wait_for bounds the whole exchange.
            data = await asyncio.wait_for(self._get_json(url), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            logger.warning(f"Directions request timed out after {self.timeout:.1f}s")
            raise DirectionsUnavailableError(f"Directions request timed out after {self.timeout:.1f}s") from e
        except httpx.HTTPStatusError as e:
            logger.warning(f"Directions service answered {e.response.status_code}")
            raise DirectionsUnavailableError(
                f"Directions service answered HTTP {e.response.status_code}"
            ) from e
        except httpx.TimeoutException as e:
            logger.warning(f"Directions request timed out: {e}")
            raise DirectionsUnavailableError(f"Directions request timed out: {e}") from e
        except httpx.HTTPError as e:
            logger.warning(f"Directions transport error: {e}")
            raise DirectionsUnavailableError(f"Failed to reach directions service: {e}") from e
        except ValueError as e:
            raise DirectionsUnavailableError("Directions response is not valid JSON.") from e

        try:
            return parse_route_response(data)
        except (TypeError, ValueError) as e:
            raise DirectionsUnavailableError(f"Directions response has malformed route fields: {e}") from e

    async def check_health(self) -> bool:
        """Check the service by requesting a short two-point route."""
        try:
            await self.route(HEALTH_CHECK_WAYPOINTS)
        except (DirectionsUnavailableError, NoRouteFoundError) as e:
            logger.warning(f"Directions health check failed: {e}")
            return False
        return True
