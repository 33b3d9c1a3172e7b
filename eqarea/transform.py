"""Area-preserving drag.

A polygon's true ground area is measured once, when it is drawn.  Every drag
step translates the vertices in lat/lon, re-measures the area in the UTM zone
of the new position and scales the shape about its centroid so the measured
area matches the original again.  Each step starts over from the current ring
and the original area, so errors do not accumulate across a gesture.
"""

import logging
import math
import uuid
from dataclasses import dataclass, field

from shapely import affinity
from shapely.geometry import MultiPoint

from .errors import DegenerateGeometryError
from .geometry import centroid, ring_area, validate_ring
from .projection import Projector
from .zones import central_meridian, select_zone

logger = logging.getLogger(__name__)

SQ_METERS_PER_KM2 = 1_000_000.0


@dataclass
class Polygon:
    """A drawn shape: its current ring and the area it must keep."""
    ring: list[tuple[float, float]]  # (lat, lon), open
    original_area: float  # m², fixed at creation
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    @property
    def area_km2(self) -> float:
        return self.original_area / SQ_METERS_PER_KM2


def _check_area(area: float, what: str) -> float:
    if not math.isfinite(area) or area <= 0.0:
        raise DegenerateGeometryError(f"{what} area is {area!r}; cannot preserve area")
    return area


def create_from_vertices(vertices, polygon_id: str | None = None) -> Polygon:
    """Build a Polygon and fix its canonical area.

    Raises InvalidInputError for fewer than 3 vertices and
    DegenerateGeometryError when the vertices enclose no area.
    """
    ring = validate_ring(vertices)
    zone = select_zone(*centroid(ring))
    area = _check_area(ring_area(ring, zone), "Drawn")
    polygon = Polygon(ring=ring, original_area=area)
    if polygon_id is not None:
        polygon.id = polygon_id
    logger.debug("Created polygon %s: %d vertices, zone %d, %.1f m²",
                 polygon.id, len(ring), zone, area)
    return polygon


def apply_drag(polygon: Polygon, d_lat: float, d_lng: float) -> list[tuple[float, float]]:
    """Return the polygon's ring moved by (d_lat, d_lng) with its area restored.

    The polygon itself is not modified; the caller stores the returned ring.
    """
    # 1. translate in lat/lon; shapely points carry (lon, lat) as (x, y)
    geographic = MultiPoint([(lon, lat) for lat, lon in polygon.ring])
    shifted = affinity.translate(geographic, xoff=d_lng, yoff=d_lat)
    moved = validate_ring([(p.y, p.x) for p in shifted.geoms])

    # 2. zone follows the shape
    c_lat, c_lon = centroid(moved)
    zone = select_zone(c_lat, c_lon)
    projector = Projector(zone)

    # 3. measure where it landed
    current = _check_area(ring_area(moved, zone), "Translated")

    # 4.
    scale = math.sqrt(polygon.original_area / current)
    if not math.isfinite(scale) or scale <= 0.0:
        raise DegenerateGeometryError(f"Scale factor {scale!r} for polygon {polygon.id}")

    # 5. scale about the planar centroid
    origin = projector.project(c_lat, c_lon)
    planar = MultiPoint([projector.project(lat, lon) for lat, lon in moved])
    scaled = affinity.scale(planar, xfact=scale, yfact=scale, origin=origin)

    # 6. back to lat/lon, longitudes kept continuous with the centroid
    ring = []
    for p in scaled.geoms:
        lat, lon = projector.unproject(p.x, p.y)
        ring.append((lat, c_lon + (lon - c_lon + 180.0) % 360.0 - 180.0))
    logger.debug("Dragged polygon %s by (%g, %g): zone %d (meridian %g), scale %.6f",
                 polygon.id, d_lat, d_lng, zone, central_meridian(zone), scale)
    return ring
