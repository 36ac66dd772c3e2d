"""Driver routing endpoints."""

from __future__ import annotations

import logging
from collections import OrderedDict

from fastapi import APIRouter, HTTPException, Request, status

from ...config import settings
from ...models.domain import BinStatus
from ...persistence.bins import BinStoreUnavailableError, load_active_bins, update_bin_status
from ...schemas.bins import BinModel, CoordinateModel
from ...schemas.routing import (
    RouteRefreshRequest,
    RouteRefreshResponse,
    ServiceBinRequest,
    ServiceBinResponse,
)
from ...services.geospatial import haversine_km, reachable_bin
from ...services.routing import (
    DirectionsUnavailableError,
    MalformedEncodingError,
    NoRouteFoundError,
    Recompute,
    RouteSelector,
    RouteSupersededError,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/drivers", tags=["routes"])


def _selector_for(request: Request, driver_id: str) -> RouteSelector:
    selectors: OrderedDict[str, RouteSelector] = request.app.state.route_selectors
    selector = selectors.get(driver_id)
    if selector is None:
        selector = RouteSelector(request.app.state.directions_client)
        selectors[driver_id] = selector
        while len(selectors) > settings.max_tracked_drivers:
            dropped, _ = selectors.popitem(last=False)
            logger.info(f"Dropped route state for idle driver {dropped}")
    else:
        selectors.move_to_end(driver_id)
    return selector


@router.post("/{driver_id}/route", response_model=RouteRefreshResponse, status_code=status.HTTP_200_OK)
async def refresh_route(driver_id: str, payload: RouteRefreshRequest, request: Request) -> RouteRefreshResponse:
    try:
        bins = load_active_bins()
    except BinStoreUnavailableError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc

    selector = _selector_for(request, driver_id)
    position = payload.vehicle_position.to_domain() if payload.vehicle_position else None
    try:
        decision = await selector.refresh(bins, position)
    except NoRouteFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except (DirectionsUnavailableError, MalformedEncodingError) as exc:
        logger.warning(f"Route unavailable for driver {driver_id}: {exc}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Route unavailable: {exc}",
        ) from exc
    except RouteSupersededError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc

    waypoints = decision.waypoints if isinstance(decision, Recompute) else ()
    return RouteRefreshResponse(
        driver_id=driver_id,
        decision=decision.kind,
        waypoints=[CoordinateModel.from_domain(point) for point in waypoints],
        route=[CoordinateModel.from_domain(point) for point in selector.current_route],
    )


@router.post("/{driver_id}/service", response_model=ServiceBinResponse, status_code=status.HTTP_200_OK)
def service_nearest_bin(driver_id: str, payload: ServiceBinRequest) -> ServiceBinResponse:
    """Mark the bin the driver is standing at as emptied."""
    try:
        bins = load_active_bins()
    except BinStoreUnavailableError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc

    position = payload.vehicle_position.to_domain()
    target = reachable_bin(position, bins)
    if target is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No bin within reach of the vehicle.",
        )

    update_bin_status(target.id, BinStatus.EMPTY)
    target.status = BinStatus.EMPTY
    logger.info(f"Driver {driver_id} serviced bin {target.id}")
    return ServiceBinResponse(
        bin=BinModel.from_domain(target),
        distance_km=haversine_km(position, target.coordinate),
    )
