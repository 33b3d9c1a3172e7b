"""Flask application: map UI plus the polygon API."""

import logging
import math
import os

from flask import Flask, jsonify, request

from .errors import (DegenerateGeometryError, InvalidInputError,
                     PolygonNotFoundError, ProjectionError)
from .geometry import centroid, ring_area, validate_ring
from .store import PolygonStore
from .transform import Polygon, SQ_METERS_PER_KM2
from .zones import select_zone

logger = logging.getLogger(__name__)

# Paths
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
STATIC_DIR = os.path.join(BASE_DIR, "static")

app = Flask(__name__, static_folder=STATIC_DIR, static_url_path="")

store = PolygonStore()


def _polygon_json(polygon: Polygon) -> dict:
    return {
        "id": polygon.id,
        "positions": [[lat, lon] for lat, lon in polygon.ring],
        "originalArea": polygon.original_area,
        "areaKm2": round(polygon.area_km2, 2),
    }


def _json_object() -> dict:
    data = request.get_json(force=True, silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidInputError("Request body must be a JSON object")
    return data


def _float(data: dict, key: str) -> float:
    value = float(data[key])
    if not math.isfinite(value):
        raise ValueError(f"{key} must be finite")
    return value


@app.errorhandler(InvalidInputError)
def invalid_input(exc):
    return jsonify({"error": str(exc)}), 400


@app.errorhandler(PolygonNotFoundError)
def not_found(exc):
    return jsonify({"error": str(exc)}), 404


@app.errorhandler(DegenerateGeometryError)
@app.errorhandler(ProjectionError)
def cannot_preserve(exc):
    return jsonify({"error": f"Cannot preserve area: {exc}"}), 422


@app.route("/")
def index():
    return app.send_static_file("index.html")


@app.route("/api/polygons", methods=["GET"])
def list_polygons():
    return jsonify({"polygons": [_polygon_json(p) for p in store.polygons()]})


@app.route("/api/polygons", methods=["POST"])
def create_polygon():
    data = _json_object()
    vertices = data.get("vertices")
    if not isinstance(vertices, list):
        return jsonify({"error": "vertices must be a list of [lat, lng] pairs"}), 400

    polygon = store.create(vertices)
    return jsonify(_polygon_json(polygon)), 201


@app.route("/api/polygons/<polygon_id>", methods=["GET"])
def get_polygon(polygon_id):
    return jsonify(_polygon_json(store.get(polygon_id)))


@app.route("/api/polygons/<polygon_id>/drag", methods=["POST"])
def drag_polygon(polygon_id):
    data = _json_object()
    try:
        d_lat = _float(data, "dLat")
        d_lng = _float(data, "dLng")
    except (KeyError, TypeError, ValueError) as exc:
        return jsonify({"error": f"Invalid parameters: {exc}"}), 400

    polygon = store.drag(polygon_id, d_lat, d_lng)
    return jsonify(_polygon_json(polygon))


@app.route("/api/polygons/<polygon_id>", methods=["DELETE"])
def delete_polygon(polygon_id):
    store.remove(polygon_id)
    return "", 204


@app.route("/api/area", methods=["POST"])
def measure():
    """Measure a ring without storing it."""
    data = _json_object()
    ring = validate_ring(data.get("vertices") or [])
    zone = select_zone(*centroid(ring))
    area = ring_area(ring, zone)
    return jsonify({
        "zone": zone,
        "area": area,
        "areaKm2": round(area / SQ_METERS_PER_KM2, 2),
    })
