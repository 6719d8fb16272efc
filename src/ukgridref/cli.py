"""
National Grid Reference Converter — Interactive CLI
===================================================
Thin wrapper around the ukgridref library.

Usage:
    ukgridref                          # interactive mode
    ukgridref "TQ 30695 80671"         # grid reference -> coordinates
    ukgridref 530695 180671            # coordinates -> grid reference

Settings are read from environment variables:
    UKGRIDREF_RESOLUTION   Digits per axis for coordinate input (0-5, default 5)
    UKGRIDREF_DATUM        WGS84 (default) or OSGB36
    UKGRIDREF_LOG_LEVEL    Logging level (default WARNING)
"""

import logging
import os
import sys

from ukgridref import Coordinate, normalise, parse_grid_ref
from ukgridref.exceptions import UKGridRefError
from ukgridref.geodesy import DEFAULT_DATUM, PIPELINES

# ── Settings ──────────────────────────────────────────────────
_RESOLUTION = os.environ.get("UKGRIDREF_RESOLUTION", "5")
_DATUM = os.environ.get("UKGRIDREF_DATUM", DEFAULT_DATUM).upper()
_LOG_LEVEL = os.environ.get("UKGRIDREF_LOG_LEVEL", "WARNING").upper()

_BANNER = """\
╔══════════════════════════════════════╗
║    National Grid Reference Lookup    ║
║  NGR ⇄ Easting/Northing → Lat/Lon    ║
╚══════════════════════════════════════╝
Enter a grid reference or 'easting northing'.
Type 'q' to quit.
"""


def _read_resolution() -> int:
    try:
        resolution = int(_RESOLUTION)
    except ValueError:
        resolution = -1
    if not 0 <= resolution <= 5:
        raise ValueError(
            f"UKGRIDREF_RESOLUTION must be 0-5, not '{_RESOLUTION}'"
        )
    return resolution


def _parse_coordinate(parts: list[str]) -> Coordinate:
    try:
        return Coordinate(int(parts[0]), int(parts[1]))
    except ValueError:
        raise ValueError(
            f"Easting and northing must be whole metres: {' '.join(parts)}"
        ) from None


def convert(
    text: str, resolution: int = 5, datum: str = DEFAULT_DATUM
) -> dict:
    """
    Convert one line of input to a result dictionary.

    Two integers are treated as easting and northing; anything else as
    a grid reference (case and spacing are normalised first).
    """
    parts = text.split()
    if len(parts) == 2 and all(p.lstrip("-").isdigit() for p in parts):
        coord = _parse_coordinate(parts)
        ref = coord.to_grid_ref(resolution)
    else:
        ref = parse_grid_ref(normalise(text))
        coord = ref.to_coordinate()

    point = coord.to_geodetic(datum=datum)
    return {
        "grid_ref": ref.format(),
        "resolution": ref.digit_resolution(),
        "easting": coord.easting,
        "northing": coord.northing,
        "latitude": round(point.latitude, 6),
        "longitude": round(point.longitude, 6),
        "datum": point.datum,
    }


def _print_result(result: dict) -> None:
    for key, val in result.items():
        print(f"{key:>12}: {val}")


def _run_interactive(resolution: int, datum: str) -> None:
    print(_BANNER)

    while True:
        try:
            raw = input("\nNGR or E N:  ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            break

        if raw.lower() in ("q", "quit", "exit"):
            print("Bye!")
            break
        if not raw:
            continue

        try:
            result = convert(raw, resolution, datum)
        except (UKGridRefError, ValueError) as exc:
            print(f"  ✗ {exc}")
            continue

        print()
        _print_result(result)


def main(argv: list[str] | None = None) -> int:
    """Entry point — supports both CLI args and interactive mode."""
    args = sys.argv[1:] if argv is None else argv

    try:
        logging.basicConfig(
            level=_LOG_LEVEL,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
        resolution = _read_resolution()
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2
    if _DATUM not in PIPELINES:
        print(
            f"Error: UKGRIDREF_DATUM must be one of "
            f"{', '.join(sorted(PIPELINES))}, not '{_DATUM}'",
            file=sys.stderr,
        )
        return 2

    if not args:
        _run_interactive(resolution, _DATUM)
        return 0

    try:
        result = convert(" ".join(args), resolution, _DATUM)
    except (UKGridRefError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    _print_result(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
