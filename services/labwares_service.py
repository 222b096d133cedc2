"""
services.labwares_service - Create/read operations on Labware.
"""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from db.errors import NotFoundError, check_field, flush_checked
from db.models import Labware
from services.locations_service import LocationsService

logger = logging.getLogger(__name__)


class LabwaresService:

    # ── Create ─────────────────────────────────────────────────────────

    @staticmethod
    def create(session: Session, barcode: str | None,
               location_id: int | None = None) -> Labware:
        """
        Insert a Labware and return it with its new id.

        Labware created without a location is placed in the unknown
        location.  Raises ConstraintViolation when barcode is missing and
        ReferentialIntegrityError when location_id names no Location.
        """
        check_field("barcode", barcode, str)
        check_field("location_id", location_id, int)

        if location_id is None:
            location_id = LocationsService.unknown(session).id

        labware = Labware(barcode=barcode, location_id=location_id)
        session.add(labware)
        flush_checked(session)
        logger.info(f"Created labware {labware.id} ({barcode!r}) "
                    f"in location {location_id}")
        return labware

    # ── Read ───────────────────────────────────────────────────────────

    @staticmethod
    def get(session: Session, labware_id: int) -> Labware | None:
        return session.get(Labware, labware_id)

    @staticmethod
    def list_all(session: Session, location_id: int | None = None, *,
                 limit: int | None = None, offset: int = 0) -> list[Labware]:
        q = session.query(Labware)
        if location_id is not None:
            q = q.filter(Labware.location_id == location_id)
        q = q.order_by(Labware.id).offset(offset)
        if limit is not None:
            q = q.limit(limit)
        return q.all()

    @staticmethod
    def find_by_barcode(session: Session, barcode: str) -> Labware:
        """Lowest-id labware with this barcode (barcodes are not unique)."""
        labware = (
            session.query(Labware)
            .filter(Labware.barcode == barcode)
            .order_by(Labware.id)
            .first()
        )
        if labware is None:
            raise NotFoundError(f"Labware not found: {barcode!r}")
        return labware
