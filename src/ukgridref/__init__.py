"""ukgridref — British National Grid references, coordinates and lat/lon."""

import logging

from ukgridref.exceptions import (
    GeodeticConversionError,
    InvalidDigits,
    InvalidResolution,
    MalformedReference,
    MismatchedDigitLength,
    OutOfExtents,
    UKGridRefError,
    UnknownDatum,
    UnknownMyriad,
)
from ukgridref.grammar import normalise, parse_grid_ref, validate
from ukgridref.models import Coordinate, GeodeticPoint, GridRef
from ukgridref.myriads import MYRIAD_OFFSETS, MYRIAD_TABLE
from ukgridref.geodesy import get_transform, to_geodetic

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "GridRef",
    "Coordinate",
    "GeodeticPoint",
    "parse_grid_ref",
    "validate",
    "normalise",
    "to_geodetic",
    "get_transform",
    "MYRIAD_TABLE",
    "MYRIAD_OFFSETS",
    "UKGridRefError",
    "MalformedReference",
    "UnknownMyriad",
    "MismatchedDigitLength",
    "InvalidDigits",
    "InvalidResolution",
    "OutOfExtents",
    "UnknownDatum",
    "GeodeticConversionError",
]
