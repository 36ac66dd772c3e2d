"""Supabase persistence for bin records."""

from __future__ import annotations

import logging
import uuid
from typing import Any

from ..db.supabase import get_supabase_client
from ..models.domain import Bin, BinStatus, Coordinate

logger = logging.getLogger(__name__)

BINS_TABLE = "bins"


class BinStoreUnavailableError(RuntimeError):
    """Raised when the bin store is not configured."""


def _require_client():
    supabase = get_supabase_client()
    if not supabase:
        raise BinStoreUnavailableError(
            "Supabase not configured. Set BINROUTE_SUPABASE_URL and BINROUTE_SUPABASE_KEY environment variables."
        )
    return supabase


def _row_to_bin(row: dict[str, Any]) -> Bin | None:
    try:
        status = BinStatus(str(row.get("status", "")).upper())
    except ValueError:
        logger.warning(f"Skipping bin {row.get('id')!r} with unknown status {row.get('status')!r}")
        return None
    return Bin(
        id=str(row["id"]),
        status=status,
        coordinate=Coordinate(latitude=float(row["latitude"]), longitude=float(row["longitude"])),
        deleted=bool(row.get("is_deleted", False)),
    )


def load_active_bins() -> list[Bin]:
    """Return every bin that has not been soft-deleted, in table order."""
    supabase = _require_client()
    response = (
        supabase.table(BINS_TABLE)
        .select("id,status,latitude,longitude,is_deleted")
        .eq("is_deleted", False)
        .execute()
    )
    bins = [item for item in (_row_to_bin(row) for row in (response.data or [])) if item is not None]
    logger.info(f"Loaded {len(bins)} active bins")
    return bins


def create_bin(coordinate: Coordinate, status: BinStatus = BinStatus.EMPTY) -> Bin:
    """Record a bin reported at ``coordinate``."""
    supabase = _require_client()
    record = {
        "id": uuid.uuid4().hex,
        "status": status.value,
        "latitude": coordinate.latitude,
        "longitude": coordinate.longitude,
        "is_deleted": False,
    }
    supabase.table(BINS_TABLE).insert(record).execute()
    logger.info(f"Created bin {record['id']} at {coordinate.latitude},{coordinate.longitude}")
    return Bin(id=record["id"], status=status, coordinate=coordinate, deleted=False)


def update_bin_status(bin_id: str, status: BinStatus) -> None:
    supabase = _require_client()
    supabase.table(BINS_TABLE).update({"status": status.value}).eq("id", bin_id).execute()
    logger.info(f"Bin {bin_id} marked {status.value}")


def soft_delete_bin(bin_id: str) -> None:
    """Flag a bin as deleted; rows are never removed."""
    supabase = _require_client()
    supabase.table(BINS_TABLE).update({"is_deleted": True}).eq("id", bin_id).execute()
    logger.info(f"Bin {bin_id} soft-deleted")
