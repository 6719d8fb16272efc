"""National grid reference validation, parsing and normalisation."""

import re

from ukgridref.exceptions import (
    MalformedReference,
    MismatchedDigitLength,
    UKGridRefError,
)
from ukgridref.models import GridRef
from ukgridref.myriads import myriad_offset

MAX_DIGITS = 5

# Letter pairs present in MYRIAD_TABLE and nothing else.
_MYRIAD_PATTERN = (
    r"[JH][F-H]|[NS][A-H]|[HNS][J-Z]|[OTY][A-C]|[OT][F-H]"
    r"|[JOT][L-N]|[JOT][Q-S]|[JOT][V-X]|X[A-E]"
)

# One alternative per digit resolution so that both halves share a length.
_DIGITS_PATTERN = "|".join(
    rf"(?P<easting{n}>[0-9]{{{n}}}) ?(?P<northing{n}>[0-9]{{{n}}})"
    for n in range(1, MAX_DIGITS + 1)
)

_NGR_RE = re.compile(
    rf"(?P<myriad>{_MYRIAD_PATTERN}) ?(?:{_DIGITS_PATTERN})?"
)


def split(raw: str) -> tuple[str, str, str]:
    """
    Split *raw* into (myriad, easting, northing) strings.

    A two character string is taken to be a bare myriad and is not
    checked here. Anything else must match the grammar exactly.

    Raises MalformedReference if it does not.
    """
    if len(raw) == 2:
        return raw, "", ""

    match = _NGR_RE.fullmatch(raw)
    if match is None:
        raise MalformedReference(raw)

    easting = northing = ""
    for name, value in match.groupdict().items():
        if not value:
            continue
        if name.startswith("easting"):
            easting = value
        elif name.startswith("northing"):
            northing = value
    return match["myriad"], easting, northing


def parse_grid_ref(raw: str) -> GridRef:
    """
    Parse an NGR such as 'TQ 30695 80671', 'TQ3069580671' or 'TQ'.

    Raises MalformedReference, UnknownMyriad or MismatchedDigitLength.
    """
    myriad, easting, northing = split(raw)

    # The myriad must exist.
    myriad_offset(myriad, raw)

    if len(easting) != len(northing):
        raise MismatchedDigitLength(raw, easting, northing)

    return GridRef(myriad, easting, northing)


def validate(raw: str) -> bool:
    """Return True if *raw* is a well formed NGR with a known myriad."""
    try:
        parse_grid_ref(raw)
    except UKGridRefError:
        return False
    return True


def normalise(raw: str) -> str:
    """
    Normalise to the canonical form, e.g. ' tq3069580671 ' -> 'TQ 30695 80671'.

    Unlike parse_grid_ref this tolerates lower case and stray whitespace.
    Raises the same errors as parse_grid_ref otherwise.
    """
    cleaned = " ".join(raw.upper().split())
    return parse_grid_ref(cleaned).format()
