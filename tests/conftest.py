import pytest

from eqarea.server import app, store

# ~1.11 km x 1.11 km square at the equator, (lat, lon)
EQUATOR_SQUARE = [(0.0, 0.0), (0.0, 0.01), (0.01, 0.01), (0.01, 0.0)]


@pytest.fixture
def square():
    return list(EQUATOR_SQUARE)


@pytest.fixture
def client():
    app.config["TESTING"] = True
    store.clear()
    with app.test_client() as c:
        yield c
    store.clear()
