"""In-memory polygon collection for one server process."""

import logging
import threading

from .errors import EqAreaError, PolygonNotFoundError
from .transform import Polygon, apply_drag, create_from_vertices

logger = logging.getLogger(__name__)


class PolygonStore:
    """Owns the drawn polygons and applies drag steps to them in order.

    A failed drag step leaves the polygon where it was.
    """

    def __init__(self):
        self._polygons: dict[str, Polygon] = {}
        self._lock = threading.Lock()

    def create(self, vertices) -> Polygon:
        polygon = self.add(create_from_vertices(vertices))
        logger.info("Polygon %s drawn: %.2f km²", polygon.id, polygon.area_km2)
        return polygon

    def add(self, polygon: Polygon) -> Polygon:
        with self._lock:
            self._polygons[polygon.id] = polygon
        return polygon

    def get(self, polygon_id: str) -> Polygon:
        with self._lock:
            return self._get(polygon_id)

    def _get(self, polygon_id: str) -> Polygon:
        try:
            return self._polygons[polygon_id]
        except KeyError:
            raise PolygonNotFoundError(f"No polygon with id {polygon_id!r}") from None

    def polygons(self) -> list[Polygon]:
        with self._lock:
            return list(self._polygons.values())

    def drag(self, polygon_id: str, d_lat: float, d_lng: float) -> Polygon:
        with self._lock:
            polygon = self._get(polygon_id)
            try:
                ring = apply_drag(polygon, d_lat, d_lng)
            except EqAreaError as exc:
                logger.warning("Drag of polygon %s rejected: %s", polygon_id, exc)
                raise
            polygon.ring = ring
            return polygon

    def remove(self, polygon_id: str) -> Polygon:
        with self._lock:
            polygon = self._get(polygon_id)
            del self._polygons[polygon_id]
        logger.info("Polygon %s removed", polygon_id)
        return polygon

    def clear(self):
        with self._lock:
            self._polygons.clear()

    def __len__(self):
        with self._lock:
            return len(self._polygons)
