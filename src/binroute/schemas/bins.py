"""Bin request/response schemas."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from ..models.domain import Bin, BinStatus, Coordinate


class CoordinateModel(BaseModel):
    latitude: float
    longitude: float

    def to_domain(self) -> Coordinate:
        return Coordinate(latitude=self.latitude, longitude=self.longitude)

    @classmethod
    def from_domain(cls, coordinate: Coordinate) -> "CoordinateModel":
        return cls(latitude=coordinate.latitude, longitude=coordinate.longitude)


class BinModel(BaseModel):
    id: str
    status: BinStatus
    coordinate: CoordinateModel
    deleted: bool = False

    @classmethod
    def from_domain(cls, item: Bin) -> "BinModel":
        return cls(
            id=item.id,
            status=item.status,
            coordinate=CoordinateModel.from_domain(item.coordinate),
            deleted=item.deleted,
        )


class BinReportRequest(BaseModel):
    coordinate: CoordinateModel
    status: BinStatus = BinStatus.EMPTY


class BinStatusUpdate(BaseModel):
    status: BinStatus


class BinListResponse(BaseModel):
    bins: List[BinModel] = Field(default_factory=list)
