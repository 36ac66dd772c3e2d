"""Routing request/response schemas."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from .bins import BinModel, CoordinateModel


class RouteRefreshRequest(BaseModel):
    vehicle_position: Optional[CoordinateModel] = Field(
        default=None,
        description="Current vehicle position. Without it a changed bin set is deferred.",
    )


class RouteRefreshResponse(BaseModel):
    driver_id: str
    decision: Literal["no_change", "deferred", "recompute"]
    waypoints: List[CoordinateModel] = Field(default_factory=list)
    route: List[CoordinateModel] = Field(
        default_factory=list,
        description="Last successfully decoded route for this driver.",
    )


class ServiceBinRequest(BaseModel):
    vehicle_position: CoordinateModel


class ServiceBinResponse(BaseModel):
    bin: BinModel
    distance_km: float
