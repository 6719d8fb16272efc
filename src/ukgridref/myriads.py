"""
Myriad (100km square) lookup tables.

MYRIAD_TABLE is indexed ``[easting // 100000][(northing + 100000) // 100000]``.
Compared with a printed map it reads rotated: each row is a column of the
grid, running south to north. Column 0 is the extra row south of the
official origin used for Channel Islands assets; the O and J myriads
cover the North Sea. None of these are within the Ordnance Survey's
published range but they are in real use.
"""

from types import MappingProxyType
from typing import Mapping

from ukgridref.exceptions import UnknownMyriad

MYRIAD_SIZE = 100000

# Northing offset of column 0 below the official grid origin.
SOUTH_SHIFT = 100000

MYRIAD_TABLE: tuple[tuple[str, ...], ...] = (
    ("XA", "SV", "SQ", "SL", "SF", "SA", "NV", "NQ", "NL", "NF", "NA", "HV", "HQ", "HL", "HF"),
    ("XB", "SW", "SR", "SM", "SG", "SB", "NW", "NR", "NM", "NG", "NB", "HW", "HR", "HM", "HG"),
    ("XC", "SX", "SS", "SN", "SH", "SC", "NX", "NS", "NN", "NH", "NC", "HX", "HS", "HN", "HH"),
    ("XD", "SY", "ST", "SO", "SJ", "SD", "NY", "NT", "NO", "NJ", "ND", "HY", "HT", "HO", "HJ"),
    ("XE", "SZ", "SU", "SP", "SK", "SE", "NZ", "NU", "NP", "NK", "NE", "HZ", "HU", "HP", "HK"),
    ("YA", "TV", "TQ", "TL", "TF", "TA", "OV", "OQ", "OL", "OF", "OA", "JV", "JQ", "JL", "JF"),
    ("YB", "TW", "TR", "TM", "TG", "TB", "OW", "OR", "OM", "OG", "OB", "JW", "JR", "JM", "JG"),
    ("YC", "TX", "TS", "TN", "TH", "TC", "OX", "OS", "ON", "OH", "OC", "JX", "JS", "JN", "JH"),
)


def _build_offsets() -> Mapping[str, tuple[int, int]]:
    """South-west corner of every myriad, derived from its table position."""
    offsets = {}
    for i, column in enumerate(MYRIAD_TABLE):
        for j, myriad in enumerate(column):
            offsets[myriad] = (MYRIAD_SIZE * i, MYRIAD_SIZE * j - SOUTH_SHIFT)
    return MappingProxyType(offsets)


MYRIAD_OFFSETS = _build_offsets()


def myriad_offset(myriad: str, reference: str | None = None) -> tuple[int, int]:
    """
    Return the (easting, northing) of the south-west corner of *myriad*.

    Raises UnknownMyriad if the code is not in the table.
    """
    try:
        return MYRIAD_OFFSETS[myriad]
    except KeyError:
        raise UnknownMyriad(reference if reference is not None else myriad, myriad) from None
