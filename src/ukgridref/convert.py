"""Conversion between grid references and integer grid coordinates."""

import logging

from ukgridref.exceptions import (
    InvalidDigits,
    InvalidResolution,
    MismatchedDigitLength,
    OutOfExtents,
)
from ukgridref.models import Coordinate, GridRef
from ukgridref.myriads import MYRIAD_SIZE, MYRIAD_TABLE, SOUTH_SHIFT, myriad_offset

logger = logging.getLogger(__name__)

# Metres per unit of the last digit, keyed by digit resolution.
_FACTORS = {1: 10000, 2: 1000, 3: 100, 4: 10, 5: 1}


def _digits_to_int(ref: GridRef, axis: str, digits: str) -> int:
    # int() would also accept signs, underscores, whitespace and non-ASCII digits
    if not (digits.isascii() and digits.isdigit()) or len(digits) > 5:
        raise InvalidDigits(str(ref), axis, digits)
    return int(digits)


def grid_ref_to_coordinate(ref: GridRef) -> Coordinate:
    """
    Resolve *ref* to the coordinate of its south-west corner.

    Shorter references are truncated, never rounded: 'SH 123 124' is
    (212300, 312400) whatever lies within that 100m square.

    Raises UnknownMyriad, MismatchedDigitLength or InvalidDigits.
    """
    offset_e, offset_n = myriad_offset(ref.myriad, str(ref))

    if len(ref.easting) != len(ref.northing):
        raise MismatchedDigitLength(str(ref), ref.easting, ref.northing)

    if not ref.easting:
        return Coordinate(offset_e, offset_n)

    easting = _digits_to_int(ref, "easting", ref.easting)
    northing = _digits_to_int(ref, "northing", ref.northing)
    factor = _FACTORS[len(ref.easting)]

    return Coordinate(offset_e + easting * factor, offset_n + northing * factor)


def coordinate_to_grid_ref(coord: Coordinate, resolution: int = 5) -> GridRef:
    """
    Return the grid reference of the *resolution*-digit cell holding *coord*.

    Resolution 0 gives the bare myriad.

    Raises InvalidResolution, or OutOfExtents naming the side of the
    myriad table the coordinate falls beyond.
    """
    if (
        not isinstance(resolution, int)
        or isinstance(resolution, bool)
        or not 0 <= resolution <= 5
    ):
        raise InvalidResolution(resolution)

    if coord.easting < 0:
        raise _out_of_extents(coord, "west")
    i = coord.easting // MYRIAD_SIZE
    if i >= len(MYRIAD_TABLE):
        raise _out_of_extents(coord, "east")

    # Column 0 holds the Channel Islands myriads south of the origin.
    shifted = coord.northing + SOUTH_SHIFT
    if shifted < 0:
        raise _out_of_extents(coord, "south")
    j = shifted // MYRIAD_SIZE
    if j >= len(MYRIAD_TABLE[i]):
        raise _out_of_extents(coord, "north")

    myriad = MYRIAD_TABLE[i][j]
    if resolution == 0:
        return GridRef(myriad)

    factor = _FACTORS[resolution]
    easting = coord.easting % MYRIAD_SIZE // factor
    northing = shifted % MYRIAD_SIZE // factor
    return GridRef(myriad, f"{easting:0{resolution}d}", f"{northing:0{resolution}d}")


def _out_of_extents(coord: Coordinate, direction: str) -> OutOfExtents:
    logger.debug(
        "Coordinate (%d, %d) outside myriad table (%s)",
        coord.easting, coord.northing, direction,
    )
    return OutOfExtents(coord.easting, coord.northing, direction)
