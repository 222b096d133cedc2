"""
services.location_types_service - Create/read operations on LocationType.

All session management is the caller's responsibility (open before,
close/commit after).
"""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from db.errors import check_field, flush_checked
from db.models import LocationType

logger = logging.getLogger(__name__)


class LocationTypesService:

    # ── Create ─────────────────────────────────────────────────────────

    @staticmethod
    def create(session: Session, name: str | None) -> LocationType:
        """
        Insert a LocationType and return it with its new id.
        Raises ConstraintViolation when name is missing.
        """
        check_field("name", name, str)

        location_type = LocationType(name=name)
        session.add(location_type)
        flush_checked(session)
        logger.info(f"Created location type {location_type.id} ({name!r})")
        return location_type

    @staticmethod
    def get_or_create(session: Session, name: str) -> LocationType:
        existing = (
            session.query(LocationType)
            .filter(LocationType.name == name)
            .order_by(LocationType.id)
            .first()
        )
        if existing is not None:
            return existing
        return LocationTypesService.create(session, name)

    # ── Read ───────────────────────────────────────────────────────────

    @staticmethod
    def get(session: Session, location_type_id: int) -> LocationType | None:
        return session.get(LocationType, location_type_id)

    @staticmethod
    def list_all(session: Session, *, limit: int | None = None,
                 offset: int = 0) -> list[LocationType]:
        q = session.query(LocationType).order_by(LocationType.id).offset(offset)
        if limit is not None:
            q = q.limit(limit)
        return q.all()
