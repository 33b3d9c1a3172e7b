"""UTM projection: WGS84 lat/lon <-> zone-local meters, via PROJ (pyproj)."""

import logging
import math
import threading

from pyproj import CRS, Transformer
from pyproj.exceptions import ProjError

from .errors import ProjectionError
from .zones import validate_point, wrap_longitude, zone_proj4

logger = logging.getLogger(__name__)

WGS84 = CRS.from_epsg(4326)

# Built once per zone for the whole process.  pyproj transformers are not
# safe to call from two threads at once, so calls hold the same lock.
_cache: dict[int, tuple[Transformer, Transformer]] = {}
_lock = threading.Lock()


def _transformers(zone: int) -> tuple[Transformer, Transformer]:
    with _lock:
        pair = _cache.get(zone)
        if pair is None:
            utm = CRS.from_proj4(zone_proj4(zone))
            pair = (Transformer.from_crs(WGS84, utm, always_xy=True),
                    Transformer.from_crs(utm, WGS84, always_xy=True))
            _cache[zone] = pair
            logger.debug("Built transformers for zone %d", zone)
        return pair


class Projector:
    """Projects WGS84 coordinates into one UTM zone and back.

    X = easting, Y = northing, both in meters.  Points are only comparable
    with other points projected under the same zone.
    """

    def __init__(self, zone: int):
        self.zone = zone
        self._forward, self._inverse = _transformers(zone)

    def project(self, lat: float, lon: float) -> tuple[float, float]:
        """Return (x, y) in meters."""
        lat, lon = validate_point(lat, lon)
        try:
            with _lock:
                x, y = self._forward.transform(wrap_longitude(lon), lat, errcheck=True)
        except ProjError as exc:
            raise ProjectionError(
                f"Cannot project ({lat}, {lon}) into zone {self.zone}: {exc}") from exc
        if not (math.isfinite(x) and math.isfinite(y)):
            raise ProjectionError(
                f"Projection of ({lat}, {lon}) into zone {self.zone} is not finite")
        return (x, y)

    def unproject(self, x: float, y: float) -> tuple[float, float]:
        """Return (lat, lon) in degrees."""
        try:
            with _lock:
                lon, lat = self._inverse.transform(x, y, errcheck=True)
        except ProjError as exc:
            raise ProjectionError(
                f"Cannot unproject ({x}, {y}) from zone {self.zone}: {exc}") from exc
        if not (math.isfinite(lat) and math.isfinite(lon)):
            raise ProjectionError(
                f"Inverse projection of ({x}, {y}) from zone {self.zone} is not finite")
        return (lat, lon)


def to_planar(lat: float, lon: float, zone: int) -> tuple[float, float]:
    return Projector(zone).project(lat, lon)


def to_geographic(x: float, y: float, zone: int) -> tuple[float, float]:
    return Projector(zone).unproject(x, y)


def project_ring(ring, zone: int) -> list[tuple[float, float]]:
    """Project a list of (lat, lon) into a list of (x, y)."""
    projector = Projector(zone)
    return [projector.project(lat, lon) for lat, lon in ring]


def unproject_ring(points, zone: int) -> list[tuple[float, float]]:
    """Inverse of project_ring."""
    projector = Projector(zone)
    return [projector.unproject(x, y) for x, y in points]
