"""UTM zone selection: 6-degree longitude bands, signed by hemisphere.

A zone is a plain int.  Its absolute value is the band (1-60) and its sign
is the hemisphere: positive north of the equator (latitude 0 included),
negative south of it.
"""

import math

from .errors import InvalidInputError

BAND_WIDTH_DEG = 6.0
BAND_COUNT = 60


def validate_point(lat: float, lon: float) -> tuple[float, float]:
    """Return (lat, lon) as floats, raising InvalidInputError if out of range.

    Longitude may be any finite value: a shape dragged across the
    antimeridian keeps continuous, unwrapped longitudes such as 180.03.
    """
    try:
        lat = float(lat)
        lon = float(lon)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"Coordinates must be numbers: {exc}") from exc
    if not (math.isfinite(lat) and math.isfinite(lon)):
        raise InvalidInputError(f"Non-finite coordinate ({lat}, {lon})")
    if not -90.0 <= lat <= 90.0:
        raise InvalidInputError(f"Latitude {lat} outside [-90, 90]")
    return lat, lon


def wrap_longitude(lon: float) -> float:
    """Bring a longitude into [-180, 180], leaving in-range values as they are."""
    if -180.0 <= lon <= 180.0:
        return lon
    return (lon + 180.0) % 360.0 - 180.0


def select_zone(lat: float, lon: float) -> int:
    """Pick the zone whose projection is least distorted at (lat, lon)."""
    lat, lon = validate_point(lat, lon)
    lon = wrap_longitude(lon)
    band = min(int(math.floor((lon + 180.0) / BAND_WIDTH_DEG)) + 1, BAND_COUNT)
    return band if lat >= 0 else -band


def _check_zone(zone: int) -> int:
    if not isinstance(zone, int) or isinstance(zone, bool) or not 1 <= abs(zone) <= BAND_COUNT:
        raise InvalidInputError(f"Invalid zone {zone!r}")
    return zone


def zone_band(zone: int) -> int:
    return abs(_check_zone(zone))


def is_northern(zone: int) -> bool:
    return _check_zone(zone) > 0


def central_meridian(zone: int) -> float:
    """Longitude of the band's central meridian in degrees."""
    return (zone_band(zone) - 1) * BAND_WIDTH_DEG - 180.0 + BAND_WIDTH_DEG / 2


def zone_proj4(zone: int) -> str:
    """PROJ definition of the zone on the WGS84 ellipsoid, in meters."""
    hemisphere = "" if is_northern(zone) else " +south"
    return (f"+proj=utm +zone={zone_band(zone)}{hemisphere} "
            "+ellps=WGS84 +datum=WGS84 +units=m +no_defs")
