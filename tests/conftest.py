"""Shared test fixtures — reference points and a stand-in geodetic transform."""

import pytest

from ukgridref.models import Coordinate, GridRef


class RecordingTransform:
    """Geodetic transform that returns fixed values and records its calls."""

    def __init__(self, result=(51.5, -0.12)):
        self.result = result
        self.calls = []

    def __call__(self, easting, northing):
        self.calls.append((easting, northing))
        return self.result


# (grid reference, south-west corner) pairs with known answers
KNOWN_POINTS = [
    (GridRef("TQ", "30695", "80671"), Coordinate(530695, 180671)),  # London
    (GridRef("SH", "123", "124"), Coordinate(212300, 312400)),
    (GridRef("HU", "473", "414"), Coordinate(447300, 1141400)),
    (GridRef("SP", "08", "86"), Coordinate(408000, 286000)),
    (GridRef("XA", "0", "0"), Coordinate(0, -100000)),
    (GridRef("XD", "980", "240"), Coordinate(398000, -76000)),
    (GridRef("XD", "923", "208"), Coordinate(392300, -79200)),
    (GridRef("XD", "92356", "20839"), Coordinate(392356, -79161)),  # St Helier
    (GridRef("TQ"), Coordinate(500000, 100000)),
    (GridRef("NN", "166", "712"), Coordinate(216600, 771200)),  # Ben Nevis
    (GridRef("HU", "39668", "75316"), Coordinate(439668, 1175316)),  # Sullom Voe
]


@pytest.fixture()
def transform() -> RecordingTransform:
    return RecordingTransform()


@pytest.fixture()
def london() -> GridRef:
    return GridRef("TQ", "30695", "80671")


@pytest.fixture(params=KNOWN_POINTS, ids=lambda pair: str(pair[0]))
def known_point(request) -> tuple[GridRef, Coordinate]:
    """Each (grid reference, south-west corner) pair in turn."""
    return request.param
