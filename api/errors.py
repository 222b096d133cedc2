"""
api.errors - JSON error handlers for the API blueprint.

    ConstraintViolation        → 400
    NotFoundError              → 404
    ReferentialIntegrityError  → 409
"""

from flask import jsonify

from api import api_bp
from db.errors import ConstraintViolation, NotFoundError, ReferentialIntegrityError


@api_bp.errorhandler(ConstraintViolation)
def api_constraint_violation(e):
    return jsonify({"error": str(e), "kind": type(e).__name__}), 400


@api_bp.errorhandler(ReferentialIntegrityError)
def api_referential_integrity(e):
    return jsonify({"error": str(e), "kind": "ReferentialIntegrityError"}), 409


@api_bp.errorhandler(NotFoundError)
def api_lookup_failed(e):
    return jsonify({"error": str(e)}), 404


@api_bp.errorhandler(404)
def api_not_found(_e):
    return jsonify({"error": "not found"}), 404


@api_bp.errorhandler(400)
def api_bad_request(_e):
    return jsonify({"error": "bad request"}), 400


@api_bp.errorhandler(500)
def api_server_error(_e):
    return jsonify({"error": "internal server error"}), 500
