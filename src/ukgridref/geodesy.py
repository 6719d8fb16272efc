"""
Grid coordinate to latitude/longitude conversion.

The ellipsoidal maths is delegated to PROJ via pyproj. Each datum maps to
an explicit pipeline rather than an EPSG code so that no transformation
grids are consulted and results do not depend on the local PROJ install:

- OSGB36: inverse National Grid transverse Mercator on the Airy 1830
  ellipsoid.
- WGS84: the same, followed by the OS 7-parameter Helmert shift
  (OSGB36 -> WGS84, position vector convention). Accurate to a few
  metres, which is well within a 1m grid reference.

Any callable taking (easting, northing) and returning (latitude,
longitude) in degrees can be passed instead of the PROJ transform.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Callable, Optional

from pyproj import Transformer

from ukgridref.exceptions import GeodeticConversionError, UKGridRefError, UnknownDatum
from ukgridref.models import Coordinate, GeodeticPoint, GridRef

logger = logging.getLogger(__name__)

GeodeticTransform = Callable[[float, float], tuple[float, float]]

DEFAULT_DATUM = "WGS84"

_NATIONAL_GRID = (
    "+proj=tmerc +lat_0=49 +lon_0=-2 +k=0.9996012717 "
    "+x_0=400000 +y_0=-100000 +ellps=airy"
)

_OSGB36_TO_WGS84 = (
    "+proj=helmert +x=446.448 +y=-125.157 +z=542.06 "
    "+rx=0.1502 +ry=0.247 +rz=0.8421 +s=-20.4894 "
    "+convention=position_vector"
)

_TO_DEGREES = "+step +proj=unitconvert +xy_in=rad +xy_out=deg"

PIPELINES = {
    "OSGB36": (
        f"+proj=pipeline +step +inv {_NATIONAL_GRID} {_TO_DEGREES}"
    ),
    "WGS84": (
        f"+proj=pipeline +step +inv {_NATIONAL_GRID} "
        f"+step +proj=cart +ellps=airy "
        f"+step {_OSGB36_TO_WGS84} "
        f"+step +inv +proj=cart +ellps=WGS84 "
        f"{_TO_DEGREES}"
    ),
}


class ProjTransform:
    """Grid to geodetic transform backed by a pyproj pipeline."""

    def __init__(self, datum: str, pipeline: str):
        self.datum = datum
        self._transformer = Transformer.from_pipeline(pipeline)

    def __call__(self, easting: float, northing: float) -> tuple[float, float]:
        lon, lat = self._transformer.transform(float(easting), float(northing))
        return lat, lon

    def __repr__(self) -> str:
        return f"ProjTransform({self.datum!r})"


def get_transform(datum: Optional[str] = None) -> ProjTransform:
    """
    Return the shared PROJ transform for *datum* (DEFAULT_DATUM if None).

    Raises UnknownDatum for anything other than the keys of PIPELINES.
    """
    return _build_transform(datum or DEFAULT_DATUM)


@lru_cache(maxsize=None)
def _build_transform(datum: str) -> ProjTransform:
    try:
        pipeline = PIPELINES[datum]
    except KeyError:
        raise UnknownDatum(datum) from None
    logger.debug("Building %s transform: %s", datum, pipeline)
    return ProjTransform(datum, pipeline)


def to_geodetic(
    coord: Coordinate,
    datum: Optional[str] = None,
    transform: Optional[GeodeticTransform] = None,
) -> GeodeticPoint:
    """
    Convert a grid coordinate to latitude/longitude on *datum*.

    *datum* defaults to DEFAULT_DATUM. *transform* overrides the PROJ
    transform; *datum* then only labels the result.
    """
    datum = datum or DEFAULT_DATUM
    if transform is None:
        transform = get_transform(datum)
    lat, lon = transform(coord.easting, coord.northing)
    return GeodeticPoint(latitude=lat, longitude=lon, datum=datum)


def grid_ref_to_geodetic(
    ref: GridRef,
    datum: Optional[str] = None,
    transform: Optional[GeodeticTransform] = None,
) -> GeodeticPoint:
    """
    Convert the south-west corner of *ref* to latitude/longitude.

    Raises GeodeticConversionError, chained to the underlying error, if
    the reference cannot be resolved to a coordinate.
    """
    try:
        coord = ref.to_coordinate()
    except UKGridRefError as exc:
        raise GeodeticConversionError(str(ref)) from exc
    return to_geodetic(coord, datum=datum, transform=transform)
