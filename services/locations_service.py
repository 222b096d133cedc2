"""
services.locations_service - Create/read operations on Location.

Location names are validated before insert.  Locations created without
a barcode get one derived from their name and id:

    "Shelf A" with id 7  →  lw-shelf-a-7
"""

from __future__ import annotations

import logging
import re

from sqlalchemy.orm import Session

import config
from db.errors import (
    ConstraintViolation,
    NameFormatError,
    NotFoundError,
    check_field,
    flush_checked,
)
from db.models import Location
from services.location_types_service import LocationTypesService

logger = logging.getLogger(__name__)

# Measured in UTF-8 bytes
NAME_MAX_LENGTH = 60
# Word characters, hyphens, whitespace and parentheses
NAME_PATTERN = re.compile(r"[\w\-\s()]+")


def validate_name(name: str) -> bool:
    """True when name is 1-60 bytes of characters drawn from NAME_PATTERN."""
    if not 1 <= len(name.encode("utf-8")) <= NAME_MAX_LENGTH:
        return False
    return NAME_PATTERN.fullmatch(name) is not None


def build_barcode(name: str, location_id: int) -> str:
    """lw-<name trimmed, spaces → hyphens, lower-cased>-<id>"""
    return f"lw-{name.strip().replace(' ', '-').lower()}-{location_id}"


class LocationsService:

    # ── Create ─────────────────────────────────────────────────────────

    @staticmethod
    def create(session: Session, name: str | None, location_type_id: int | None,
               barcode: str | None = None) -> Location:
        """
        Insert a Location and return it with its new id.

        Raises
        ------
        ConstraintViolation        name (or location_type_id) is missing,
                                   a field has the wrong type, or barcode
                                   is the unknown location's
        NameFormatError            name is present but malformed
        ReferentialIntegrityError  location_type_id names no LocationType
        """
        if barcode == config.UNKNOWN_LOCATION_BARCODE:
            raise ConstraintViolation(f"Barcode {barcode!r} is reserved")
        return LocationsService._insert(session, name, location_type_id, barcode)

    @staticmethod
    def _insert(session: Session, name, location_type_id, barcode) -> Location:
        if name is not None and (not isinstance(name, str) or not validate_name(name)):
            raise NameFormatError(f"Invalid name format: {name!r}")
        check_field("barcode", barcode, str)
        check_field("location_type_id", location_type_id, int)

        location = Location(name=name, barcode=barcode,
                            location_type_id=location_type_id)
        session.add(location)
        flush_checked(session)

        if location.barcode is None and config.AUTO_LOCATION_BARCODES:
            location.barcode = build_barcode(location.name, location.id)
            flush_checked(session)

        logger.info(f"Created location {location.id} ({name!r}, "
                    f"type {location_type_id}, barcode {location.barcode!r})")
        return location

    # ── Read ───────────────────────────────────────────────────────────

    @staticmethod
    def get(session: Session, location_id: int) -> Location | None:
        return session.get(Location, location_id)

    @staticmethod
    def list_all(session: Session, location_type_id: int | None = None, *,
                 limit: int | None = None, offset: int = 0) -> list[Location]:
        q = session.query(Location)
        if location_type_id is not None:
            q = q.filter(Location.location_type_id == location_type_id)
        q = q.order_by(Location.id).offset(offset)
        if limit is not None:
            q = q.limit(limit)
        return q.all()

    @staticmethod
    def find_by_barcode(session: Session, barcode: str) -> Location:
        location = (
            session.query(Location)
            .filter(Location.barcode == barcode)
            .order_by(Location.id)
            .first()
        )
        if location is None:
            raise NotFoundError(f"Location not found: {barcode!r}")
        return location

    # ── Unknown location ───────────────────────────────────────────────

    @staticmethod
    def unknown(session: Session) -> Location:
        """
        Return the reserved location for labware with nowhere else to be,
        creating it (and its location type) on first use.
        """
        location = (
            session.query(Location)
            .filter(Location.barcode == config.UNKNOWN_LOCATION_BARCODE,
                    Location.name == config.UNKNOWN_LOCATION_NAME)
            .order_by(Location.id)
            .first()
        )
        if location is not None:
            return location

        location_type = LocationTypesService.get_or_create(
            session, config.UNKNOWN_LOCATION_TYPE,
        )
        return LocationsService._insert(
            session, config.UNKNOWN_LOCATION_NAME, location_type.id,
            config.UNKNOWN_LOCATION_BARCODE,
        )
