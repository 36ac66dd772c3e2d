import math

import pytest

from binroute.models.domain import Bin, BinStatus, Coordinate
from binroute.services.geospatial import haversine_km, nearest_bin, reachable_bin


def _bin(bid: str, lat: float, lon: float, status: BinStatus = BinStatus.FULL) -> Bin:
    return Bin(id=bid, status=status, coordinate=Coordinate(latitude=lat, longitude=lon))


@pytest.mark.parametrize(
    "point",
    [
        Coordinate(latitude=0.0, longitude=0.0),
        Coordinate(latitude=21.5, longitude=39.2),
        Coordinate(latitude=-89.9, longitude=179.9),
    ],
)
def test_distance_to_self_is_zero(point: Coordinate):
    assert haversine_km(point, point) == 0.0


def test_distance_is_symmetric():
    a = Coordinate(latitude=52.517037, longitude=13.388860)
    b = Coordinate(latitude=48.856613, longitude=2.352222)

    assert haversine_km(a, b) == haversine_km(b, a)


def test_one_degree_along_equator():
    a = Coordinate(latitude=0.0, longitude=0.0)
    b = Coordinate(latitude=0.0, longitude=1.0)

    assert haversine_km(a, b) == pytest.approx(6371.0 * math.pi / 180.0)


def test_out_of_range_input_does_not_raise():
    a = Coordinate(latitude=200.0, longitude=-500.0)
    b = Coordinate(latitude=-95.0, longitude=720.0)

    distance = haversine_km(a, b)
    assert distance >= 0.0
    assert distance <= math.pi * 6371.0 + 1e-9


def test_antipodal_points():
    a = Coordinate(latitude=0.0, longitude=0.0)
    b = Coordinate(latitude=0.0, longitude=180.0)

    assert haversine_km(a, b) == pytest.approx(math.pi * 6371.0)


def test_nearest_bin_prefers_first_on_tie():
    position = Coordinate(latitude=21.5, longitude=39.2)
    bins = [
        _bin("far", 21.6, 39.2),
        _bin("north", 21.501, 39.2),
        _bin("north-again", 21.501, 39.2),
    ]

    found = nearest_bin(position, bins)

    assert found is not None
    closest, distance = found
    assert closest.id == "north"
    assert distance == pytest.approx(0.1112, abs=1e-3)
    assert [item.id for item in bins] == ["far", "north", "north-again"]


def test_nearest_bin_empty():
    assert nearest_bin(Coordinate(latitude=1.0, longitude=1.0), []) is None


def test_reachable_bin_uses_ten_metre_threshold():
    position = Coordinate(latitude=21.5, longitude=39.2)
    close = _bin("close", 21.50005, 39.2)  # ~5.6 m
    outside = _bin("outside", 21.5002, 39.2)  # ~22 m

    assert reachable_bin(position, [outside, close]).id == "close"
    assert reachable_bin(position, [outside]) is None
    assert reachable_bin(position, [outside], threshold_km=0.05).id == "outside"
