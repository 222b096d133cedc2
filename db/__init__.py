"""
db - Database layer.

Public API:
    init_db()         → create engine + tables (idempotent)
    create_db()       → init_db() on an environment's SQLite file
    get_session()     → new Session
    LocationType, Location, Labware → ORM models
    ConstraintViolation, ReferentialIntegrityError, NotFoundError → errors
"""

from db.engine import init_db, create_db, get_engine, get_session, sqlite_url  # noqa: F401
from db.models import Base, LocationType, Location, Labware, dump_schema      # noqa: F401
from db.errors import (                                                       # noqa: F401
    LabWhereError,
    ConstraintViolation,
    ReferentialIntegrityError,
    NotFoundError,
    NameFormatError,
)
