"""Encoded polyline support for directions geometry."""

from __future__ import annotations

from typing import Iterable

from ...models.domain import Coordinate
from .errors import MalformedEncodingError

PRECISION = 1e5


def _read_value(polyline: str, index: int) -> tuple[int, int]:
    """Read one zig-zag encoded delta starting at ``index``.

    Returns the signed delta and the index of the next unread character.
    """
    shift = 0
    result = 0
    while True:
        if index >= len(polyline):
            raise MalformedEncodingError(
                f"Polyline ended inside a value at position {index} (length {len(polyline)})."
            )
        b = ord(polyline[index]) - 63
        if b < 0:
            raise MalformedEncodingError(
                f"Invalid polyline character {polyline[index]!r} at position {index}."
            )
        index += 1
        result |= (b & 0x1f) << shift
        shift += 5
        if b < 0x20:
            break
    delta = ~(result >> 1) if (result & 1) else (result >> 1)
    return delta, index


def decode_polyline(polyline: str) -> list[Coordinate]:
    """Decode Google polyline string to a list of coordinates.

    OSRM uses Google's polyline encoding format (precision 1e5) for route geometry.

    Args:
        polyline: Encoded polyline string

    Returns:
        Coordinates in encoding order; empty for an empty string.

    Raises:
        MalformedEncodingError: the string is truncated or holds characters outside the alphabet.
    """
    coordinates = []
    index = 0
    lat = 0
    lon = 0

    while index < len(polyline):
        dlat, index = _read_value(polyline, index)
        lat += dlat
        if index >= len(polyline):
            raise MalformedEncodingError("Polyline ended after a latitude without its longitude.")
        dlon, index = _read_value(polyline, index)
        lon += dlon

        coordinates.append(Coordinate(latitude=lat / PRECISION, longitude=lon / PRECISION))

    return coordinates


def _write_value(value: int, chunks: list[str]) -> None:
    value = ~(value << 1) if value < 0 else value << 1
    while value >= 0x20:
        chunks.append(chr((0x20 | (value & 0x1f)) + 63))
        value >>= 5
    chunks.append(chr(value + 63))


def encode_polyline(points: Iterable[Coordinate]) -> str:
    """Encode coordinates with the same format ``decode_polyline`` reads."""
    chunks: list[str] = []
    prev_lat = 0
    prev_lon = 0
    for point in points:
        lat = int(round(point.latitude * PRECISION))
        lon = int(round(point.longitude * PRECISION))
        _write_value(lat - prev_lat, chunks)
        _write_value(lon - prev_lon, chunks)
        prev_lat, prev_lon = lat, lon
    return "".join(chunks)
