"""Decides when a collection route must be recomputed and fetches it."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional, Protocol, Sequence

from ...models.domain import Bin, BinStatus, Coordinate
from .errors import InvalidRequestError, RoutePlanningError, RouteSupersededError
from .models import DecodedRoute, Deferred, NoChange, Recompute, RecomputeDecision, RouteResponse
from .polyline import decode_polyline

logger = logging.getLogger(__name__)


class RouteProvider(Protocol):
    async def route(self, waypoints: Sequence[Coordinate]) -> RouteResponse: ...


def full_bin_ids(bins: Sequence[Bin]) -> frozenset[str]:
    return frozenset(item.id for item in bins if item.status == BinStatus.FULL)


class RouteSelector:
    """Holds the last known set of full bins for one vehicle.

    Calls are expected to be serialized by the caller's event loop; only the
    directions request suspends. A newer ``fetch_route`` cancels the one in
    flight, and the cancelled caller gets ``RouteSupersededError``.
    """

    def __init__(self, provider: RouteProvider) -> None:
        self._provider = provider
        self._previous_full_bins: frozenset[str] = frozenset()
        self._sequence = 0
        self._inflight: Optional[asyncio.Future[RouteResponse]] = None
        self._current_route: DecodedRoute = []

    @property
    def previous_full_bins(self) -> frozenset[str]:
        return self._previous_full_bins

    @property
    def current_route(self) -> DecodedRoute:
        """Last successfully decoded route; kept when a later fetch fails."""
        return list(self._current_route)

    @property
    def sequence(self) -> int:
        return self._sequence

    def on_bin_snapshot(
        self, bins: Sequence[Bin], vehicle_position: Optional[Coordinate]
    ) -> RecomputeDecision:
        current_full = full_bin_ids(bins)
        if current_full == self._previous_full_bins:
            return NoChange()

        if vehicle_position is None:
            logger.info(
                f"Full bins changed ({len(current_full)} now full) but vehicle position is unknown; deferring"
            )
            return Deferred()

        waypoints = (vehicle_position,) + tuple(
            item.coordinate for item in bins if item.id in current_full
        )
        logger.info(
            f"Full bins changed from {len(self._previous_full_bins)} to {len(current_full)}; recomputing route"
        )
        self._previous_full_bins = current_full
        return Recompute(waypoints=waypoints)

    async def fetch_route(self, waypoints: Sequence[Coordinate]) -> DecodedRoute:
        if len(waypoints) < 1:
            raise InvalidRequestError("Cannot fetch a route without waypoints.")

        self._sequence += 1
        sequence = self._sequence
        if self._inflight is not None and not self._inflight.done():
            logger.info(f"Superseding in-flight route request with #{sequence}")
            self._inflight.cancel()

        task = asyncio.ensure_future(self._provider.route(tuple(waypoints)))
        self._inflight = task
        try:
            response = await task
        except asyncio.CancelledError:
            if sequence != self._sequence:
                raise RouteSupersededError(sequence, self._sequence) from None
            raise
        finally:
            if self._inflight is task:
                self._inflight = None

        if sequence != self._sequence:
            raise RouteSupersededError(sequence, self._sequence)

        route = decode_polyline(response.encoded_geometry)
        self._current_route = route
        logger.info(f"Route request #{sequence} decoded into {len(route)} points")
        return list(route)

    async def refresh(
        self, bins: Sequence[Bin], vehicle_position: Optional[Coordinate]
    ) -> RecomputeDecision:
        """Run change detection and fetch the route when it asks for one.

        A failed fetch restores the earlier full-bin set, so the next snapshot
        with the same full bins asks for the route again. A superseded fetch
        leaves the set to the newer decision.
        """
        earlier = self._previous_full_bins
        decision = self.on_bin_snapshot(bins, vehicle_position)
        if isinstance(decision, Recompute):
            applied = self._previous_full_bins
            try:
                await self.fetch_route(decision.waypoints)
            except RouteSupersededError:
                raise
            except RoutePlanningError:
                if self._previous_full_bins is applied:
                    logger.info("Route fetch failed; full-bin set will be retried on the next snapshot")
                    self._previous_full_bins = earlier
                raise
        return decision
