"""
api.routes_location_types - /api/v1/location_types endpoints.
"""

from flask import jsonify

from api import api_bp, json_body, page_args
from db import get_session
from db.errors import LabWhereError
from services.location_types_service import LocationTypesService


@api_bp.route("/location_types")
def list_location_types():
    """GET /api/v1/location_types?limit=100&offset=0"""
    limit, offset = page_args()

    session = get_session()
    try:
        location_types = LocationTypesService.list_all(
            session, limit=limit, offset=offset,
        )
        return jsonify({
            "offset": offset,
            "limit": limit,
            "location_types": [lt.to_dict() for lt in location_types],
        })
    finally:
        session.close()


@api_bp.route("/location_types/<int:location_type_id>")
def get_location_type(location_type_id: int):
    """GET /api/v1/location_types/{id}"""
    session = get_session()
    try:
        location_type = LocationTypesService.get(session, location_type_id)
        if not location_type:
            return jsonify({"error": "not found"}), 404
        return jsonify(location_type.to_dict())
    finally:
        session.close()


@api_bp.route("/location_types", methods=["POST"])
def create_location_type():
    """
    POST /api/v1/location_types

    JSON body: {name}.  The id is assigned by the database.
    """
    data = json_body()
    session = get_session()
    try:
        location_type = LocationTypesService.create(session, data.get("name"))
        session.commit()
        return jsonify(location_type.to_dict()), 201
    except LabWhereError:
        session.rollback()
        raise
    finally:
        session.close()
