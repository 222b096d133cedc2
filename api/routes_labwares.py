"""
api.routes_labwares - /api/v1/labwares endpoints.
"""

from flask import request, jsonify

from api import api_bp, json_body, page_args
from db import get_session
from db.errors import LabWhereError
from services.labwares_service import LabwaresService


@api_bp.route("/labwares")
def list_labwares():
    """GET /api/v1/labwares?location_id=&limit=100&offset=0"""
    location_id = request.args.get("location_id", type=int)
    limit, offset = page_args()

    session = get_session()
    try:
        labwares = LabwaresService.list_all(
            session, location_id, limit=limit, offset=offset,
        )
        return jsonify({
            "offset": offset,
            "limit": limit,
            "labwares": [lw.to_dict() for lw in labwares],
        })
    finally:
        session.close()


@api_bp.route("/labwares/<int:labware_id>")
def get_labware(labware_id: int):
    """GET /api/v1/labwares/{id}"""
    session = get_session()
    try:
        labware = LabwaresService.get(session, labware_id)
        if not labware:
            return jsonify({"error": "not found"}), 404
        return jsonify(labware.to_dict())
    finally:
        session.close()


@api_bp.route("/labwares/barcode/<barcode>")
def get_labware_by_barcode(barcode: str):
    """GET /api/v1/labwares/barcode/{barcode}"""
    session = get_session()
    try:
        return jsonify(LabwaresService.find_by_barcode(session, barcode).to_dict())
    finally:
        session.close()


@api_bp.route("/labwares", methods=["POST"])
def create_labware():
    """
    POST /api/v1/labwares

    JSON body: {barcode, location_id?}.  Without a location_id the
    labware goes to the unknown location.
    """
    data = json_body()
    session = get_session()
    try:
        labware = LabwaresService.create(
            session, data.get("barcode"), data.get("location_id"),
        )
        session.commit()
        return jsonify(labware.to_dict()), 201
    except LabWhereError:
        session.rollback()
        raise
    finally:
        session.close()
