"""Domain models for bins and coordinates."""

from dataclasses import dataclass
from enum import Enum


class BinStatus(str, Enum):
    """Fullness reported for a bin."""

    EMPTY = "EMPTY"
    MID = "MID"
    FULL = "FULL"


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A point in degrees. Plain value, compared by latitude and longitude."""

    latitude: float
    longitude: float


@dataclass(slots=True)
class Bin:
    """Represents a collection container as seen in a backend snapshot."""

    id: str
    status: BinStatus
    coordinate: Coordinate
    deleted: bool = False
