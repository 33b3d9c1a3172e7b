"""Error types raised by the area-preserving engine and the web layer."""


class EqAreaError(Exception):
    """Base error for the project."""


class InvalidInputError(EqAreaError, ValueError):
    """Malformed ring or coordinate (too few vertices, out of range, NaN)."""


class DegenerateGeometryError(EqAreaError):
    """Area became zero or non-finite, so it cannot be rescaled."""


class ProjectionError(EqAreaError):
    """The projection library failed or returned non-finite coordinates."""


class PolygonNotFoundError(EqAreaError, KeyError):
    """No polygon with the requested id in the session store."""

    def __str__(self):
        # KeyError quotes its argument; keep the plain message for JSON bodies.
        return Exception.__str__(self)
