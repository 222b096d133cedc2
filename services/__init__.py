"""
services - Business-logic layer sitting between API and DB.
"""

from services.location_types_service import LocationTypesService      # noqa: F401
from services.locations_service import LocationsService                # noqa: F401
from services.locations_service import build_barcode, validate_name    # noqa: F401
from services.labwares_service import LabwaresService                  # noqa: F401
