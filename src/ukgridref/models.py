"""Typed value models for ukgridref."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ukgridref.geodesy import GeodeticTransform


@dataclass(frozen=True)
class GridRef:
    """
    A national grid reference: myriad plus easting/northing digit strings.

    The digits are kept as strings so leading zeros and the resolution
    survive a round trip. Use parse_grid_ref() or GridRef.from_string()
    to build a validated instance.
    """

    myriad: str
    easting: str = ""
    northing: str = ""

    @classmethod
    def from_string(cls, raw: str) -> GridRef:
        from ukgridref.grammar import parse_grid_ref

        return parse_grid_ref(raw)

    def format(self) -> str:
        if self.easting:
            return f"{self.myriad} {self.easting} {self.northing}"
        return self.myriad

    def __str__(self) -> str:
        return self.format()

    def digit_resolution(self) -> int:
        """Digits per axis: 0 for a bare myriad up to 5 for one metre."""
        return len(self.easting)

    def to_coordinate(self) -> Coordinate:
        """South-west corner of the square this reference denotes."""
        from ukgridref.convert import grid_ref_to_coordinate

        return grid_ref_to_coordinate(self)

    def to_geodetic(
        self,
        datum: Optional[str] = None,
        transform: Optional[GeodeticTransform] = None,
    ) -> GeodeticPoint:
        from ukgridref.geodesy import grid_ref_to_geodetic

        return grid_ref_to_geodetic(self, datum=datum, transform=transform)

    def to_dict(self) -> dict:
        return {
            "myriad": self.myriad,
            "easting": self.easting,
            "northing": self.northing,
            "resolution": self.digit_resolution(),
        }


@dataclass(frozen=True)
class Coordinate:
    """Whole metres east and north of the grid's false origin."""

    easting: int
    northing: int

    def __post_init__(self) -> None:
        for name in ("easting", "northing"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(
                    f"Coordinate {name} must be an int, not {type(value).__name__}"
                )

    def to_grid_ref(self, resolution: int = 5) -> GridRef:
        """
        Grid reference of the cell containing this coordinate.

        Raises InvalidResolution or OutOfExtents.
        """
        from ukgridref.convert import coordinate_to_grid_ref

        return coordinate_to_grid_ref(self, resolution)

    def to_geodetic(
        self,
        datum: Optional[str] = None,
        transform: Optional[GeodeticTransform] = None,
    ) -> GeodeticPoint:
        from ukgridref.geodesy import to_geodetic

        return to_geodetic(self, datum=datum, transform=transform)

    def to_dict(self) -> dict:
        return {"easting": self.easting, "northing": self.northing}


@dataclass(frozen=True)
class GeodeticPoint:
    """Latitude and longitude in decimal degrees on the named datum."""

    latitude: float
    longitude: float
    datum: str

    def to_dict(self) -> dict:
        """Convert to a plain dictionary (useful for JSON serialisation)."""
        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "datum": self.datum,
        }
