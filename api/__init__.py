"""
api - REST API layer.

All route modules register on a single Flask Blueprint
with url_prefix /api/v1.
"""

from flask import Blueprint, abort, request

import config

api_bp = Blueprint("api", __name__, url_prefix="/api/v1")


def json_body() -> dict:
    """Request JSON as a dict; 400 for anything else."""
    data = request.get_json(force=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        abort(400)
    return data


def page_args() -> tuple[int, int]:
    """(limit, offset) from the query string, clamped to 0..API_MAX_LIMIT and >= 0."""
    limit  = request.args.get("limit", config.API_DEFAULT_LIMIT, type=int)
    offset = request.args.get("offset", 0, type=int)
    return max(0, min(limit, config.API_MAX_LIMIT)), max(0, offset)


# Import route modules so their @api_bp decorators execute
from api import routes_health            # noqa: F401, E402
from api import routes_location_types    # noqa: F401, E402
from api import routes_locations         # noqa: F401, E402
from api import routes_labwares          # noqa: F401, E402
from api import errors                   # noqa: F401, E402
