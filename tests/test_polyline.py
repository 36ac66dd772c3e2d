import pytest

from binroute.models.domain import Coordinate
from binroute.services.routing.errors import MalformedEncodingError
from binroute.services.routing.polyline import decode_polyline, encode_polyline

GOOGLE_SAMPLE = "_p~iF~ps|U_ulLnnqC_mqNvxq`@"


def test_decode_empty_string():
    assert decode_polyline("") == []


def test_decode_known_sample():
    points = decode_polyline(GOOGLE_SAMPLE)

    assert points[0] == Coordinate(latitude=38.5, longitude=-120.2)
    assert points == [
        Coordinate(latitude=38.5, longitude=-120.2),
        Coordinate(latitude=40.7, longitude=-120.95),
        Coordinate(latitude=43.252, longitude=-126.453),
    ]


def test_encode_known_sample():
    points = [
        Coordinate(latitude=38.5, longitude=-120.2),
        Coordinate(latitude=40.7, longitude=-120.95),
        Coordinate(latitude=43.252, longitude=-126.453),
    ]

    assert encode_polyline(points) == GOOGLE_SAMPLE


def test_round_trip_quantized_route():
    points = [
        Coordinate(latitude=21.54321, longitude=39.17283),
        Coordinate(latitude=21.54321, longitude=39.17283),
        Coordinate(latitude=-0.00001, longitude=0.0),
        Coordinate(latitude=-33.86882, longitude=151.20929),
        Coordinate(latitude=89.99999, longitude=-179.99999),
    ]

    assert decode_polyline(encode_polyline(points)) == points


@pytest.mark.parametrize(
    "encoded",
    [
        "_p~iF~ps|U_",  # latitude continuation runs off the end
        "_p~iF",  # latitude without a longitude
        "_p~iF~ps|",  # longitude continuation runs off the end
        "_p~iF ps|U",  # character below the alphabet
    ],
)
def test_decode_malformed_input(encoded: str):
    with pytest.raises(MalformedEncodingError):
        decode_polyline(encoded)


def test_malformed_error_is_value_error():
    with pytest.raises(ValueError):
        decode_polyline("~")
