"""Bin endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from ...persistence.bins import (
    BinStoreUnavailableError,
    create_bin,
    load_active_bins,
    soft_delete_bin,
    update_bin_status,
)
from ...schemas.bins import BinListResponse, BinModel, BinReportRequest, BinStatusUpdate

router = APIRouter(prefix="/bins", tags=["bins"])


def _unavailable(exc: BinStoreUnavailableError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc))


@router.get("", response_model=BinListResponse)
def list_bins() -> BinListResponse:
    try:
        bins = load_active_bins()
    except BinStoreUnavailableError as exc:
        raise _unavailable(exc) from exc
    return BinListResponse(bins=[BinModel.from_domain(item) for item in bins])


@router.post("", response_model=BinModel, status_code=status.HTTP_201_CREATED)
def report_bin(payload: BinReportRequest) -> BinModel:
    try:
        created = create_bin(payload.coordinate.to_domain(), payload.status)
    except BinStoreUnavailableError as exc:
        raise _unavailable(exc) from exc
    return BinModel.from_domain(created)


@router.patch("/{bin_id}", status_code=status.HTTP_200_OK)
def set_bin_status(bin_id: str, payload: BinStatusUpdate) -> dict:
    try:
        update_bin_status(bin_id, payload.status)
    except BinStoreUnavailableError as exc:
        raise _unavailable(exc) from exc
    return {"id": bin_id, "status": payload.status.value}


@router.delete("/{bin_id}", status_code=status.HTTP_200_OK)
def delete_bin(bin_id: str) -> dict:
    """Soft-delete a bin; it disappears from snapshots but stays in the table."""
    try:
        soft_delete_bin(bin_id)
    except BinStoreUnavailableError as exc:
        raise _unavailable(exc) from exc
    return {"id": bin_id, "deleted": True}
