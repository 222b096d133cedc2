"""
api.routes_locations - /api/v1/locations endpoints.
"""

from flask import request, jsonify

from api import api_bp, json_body, page_args
from db import get_session
from db.errors import LabWhereError
from services.locations_service import LocationsService


@api_bp.route("/locations")
def list_locations():
    """GET /api/v1/locations?location_type_id=&limit=100&offset=0"""
    location_type_id = request.args.get("location_type_id", type=int)
    limit, offset = page_args()

    session = get_session()
    try:
        locations = LocationsService.list_all(
            session, location_type_id, limit=limit, offset=offset,
        )
        return jsonify({
            "offset": offset,
            "limit": limit,
            "locations": [loc.to_dict() for loc in locations],
        })
    finally:
        session.close()


@api_bp.route("/locations/<int:location_id>")
def get_location(location_id: int):
    """GET /api/v1/locations/{id}"""
    session = get_session()
    try:
        location = LocationsService.get(session, location_id)
        if not location:
            return jsonify({"error": "not found"}), 404
        return jsonify(location.to_dict())
    finally:
        session.close()


@api_bp.route("/locations/barcode/<barcode>")
def get_location_by_barcode(barcode: str):
    """GET /api/v1/locations/barcode/{barcode}"""
    session = get_session()
    try:
        return jsonify(LocationsService.find_by_barcode(session, barcode).to_dict())
    finally:
        session.close()


@api_bp.route("/locations", methods=["POST"])
def create_location():
    """
    POST /api/v1/locations

    JSON body: {name, location_type_id, barcode?}.  A barcode is
    generated when none is given.
    """
    data = json_body()
    session = get_session()
    try:
        location = LocationsService.create(
            session,
            data.get("name"),
            data.get("location_type_id"),
            barcode=data.get("barcode"),
        )
        session.commit()
        return jsonify(location.to_dict()), 201
    except LabWhereError:
        session.rollback()
        raise
    finally:
        session.close()
