import math

import pytest

from pyproj.exceptions import ProjError

from eqarea.errors import InvalidInputError, ProjectionError
from eqarea.projection import (Projector, project_ring, to_geographic,
                               to_planar, unproject_ring)
from eqarea.zones import select_zone

POINTS = [
    (0.0, 0.0),
    (51.505, -0.09),
    (-33.87, 151.21),
    (64.13, -21.9),
    (-54.8, -68.3),
    (83.9, 10.0),
    (-79.5, 120.0),
    (10.0, -180.0),
    (10.0, 180.0),
]


def test_central_meridian_on_equator():
    x, y = to_planar(0.0, 3.0, 31)
    assert x == pytest.approx(500_000.0, abs=1e-6)
    assert y == pytest.approx(0.0, abs=1e-6)


def test_southern_false_northing():
    x, y = to_planar(-0.000001, 3.0, -31)
    assert y == pytest.approx(10_000_000.0, abs=1.0)


@pytest.mark.parametrize("lat, lon", POINTS)
def test_round_trip(lat, lon):
    zone = select_zone(lat, lon)
    x, y = to_planar(lat, lon, zone)
    back_lat, back_lon = to_geographic(x, y, zone)
    assert back_lat == pytest.approx(lat, abs=1e-6)
    assert back_lon == pytest.approx(lon, abs=1e-6)


def test_one_degree_of_latitude_is_about_111_km():
    projector = Projector(31)
    _, y0 = projector.project(45.0, 3.0)
    _, y1 = projector.project(46.0, 3.0)
    assert y1 - y0 == pytest.approx(111_100.0, rel=0.005)


def test_ring_helpers():
    ring = [(1.0, 2.0), (1.5, 2.5), (2.0, 2.0)]
    back = unproject_ring(project_ring(ring, 31), 31)
    for (lat, lon), (blat, blon) in zip(ring, back):
        assert blat == pytest.approx(lat, abs=1e-9)
        assert blon == pytest.approx(lon, abs=1e-9)


def test_out_of_range_point():
    with pytest.raises(InvalidInputError):
        to_planar(95.0, 0.0, 31)


def test_non_finite_planar_point():
    with pytest.raises(ProjectionError):
        to_geographic(math.inf, 0.0, 31)


def test_projection_library_error_is_reported():
    class FailingTransformer:
        def transform(self, *args, **kwargs):
            raise ProjError("point outside of projection domain")

    projector = Projector(31)
    projector._forward = FailingTransformer()
    projector._inverse = FailingTransformer()
    with pytest.raises(ProjectionError, match="outside of projection domain"):
        projector.project(10.0, 3.0)
    with pytest.raises(ProjectionError):
        projector.unproject(500_000.0, 0.0)


def test_unwrapped_longitude_projects_like_its_wrapped_twin():
    x1, y1 = to_planar(10.0, 180.03, 1)
    x2, y2 = to_planar(10.0, -179.97, 1)
    assert x1 == pytest.approx(x2, abs=1e-6)
    assert y1 == pytest.approx(y2, abs=1e-6)


def test_transformers_are_reused():
    assert Projector(-17)._forward is Projector(-17)._forward
