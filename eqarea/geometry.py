"""Ring math: vertex-mean centroid and planar shoelace area."""

from shapely.algorithms.cga import signed_area as _cga_signed_area
from shapely.geometry import LinearRing

from .errors import InvalidInputError
from .projection import project_ring
from .zones import validate_point

MIN_RING_VERTICES = 3


def _pair(vertex) -> tuple:
    # tuple("12") would read as two digits
    if isinstance(vertex, (str, bytes)):
        raise TypeError(f"vertex {vertex!r} is a string")
    return tuple(vertex)


def validate_ring(ring, min_vertices: int = MIN_RING_VERTICES) -> list[tuple[float, float]]:
    """Return the ring as a list of float (lat, lon) tuples.

    The ring is open: the first vertex is not repeated at the end.
    """
    try:
        if isinstance(ring, (str, bytes)):
            raise TypeError("a string is not a ring")
        pairs = [_pair(v) for v in ring]
    except TypeError as exc:
        raise InvalidInputError(f"Ring must be a sequence of (lat, lon) pairs: {exc}") from exc
    if len(pairs) < min_vertices:
        raise InvalidInputError(
            f"Ring needs at least {min_vertices} vertices, got {len(pairs)}")
    out = []
    for pair in pairs:
        if len(pair) != 2:
            raise InvalidInputError(f"Vertex {pair!r} is not a (lat, lon) pair")
        out.append(validate_point(*pair))
    return out


def centroid(ring) -> tuple[float, float]:
    """Arithmetic mean of the vertices' latitude and longitude.

    Not the area-weighted centroid: on irregular rings it leans toward
    wherever vertices are densest.  Good enough for zone selection and as a
    scaling anchor.
    """
    pts = validate_ring(ring, min_vertices=1)
    lat = sum(p[0] for p in pts) / len(pts)
    lon = sum(p[1] for p in pts) / len(pts)
    return lat, lon


def signed_area(points) -> float:
    """Shoelace area of planar (x, y) points; positive when counter-clockwise."""
    pts = list(points)
    if len(pts) < MIN_RING_VERTICES:
        raise InvalidInputError(
            f"Ring needs at least {MIN_RING_VERTICES} vertices, got {len(pts)}")
    # close explicitly; LinearRing would not if the last vertex repeats the first
    return float(_cga_signed_area(LinearRing(pts + [pts[0]])))


def ring_area(ring, zone: int) -> float:
    """Area in square meters of a geographic ring, measured in `zone`."""
    pts = validate_ring(ring)
    return abs(signed_area(project_ring(pts, zone)))
