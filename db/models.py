"""
db.models - SQLAlchemy ORM declarations.

Tables
------
location_types - classification of a location (Freezer, Shelf, Box …).
locations      - a place labware is stored, classified by one type.
labwares       - a barcoded item, currently in exactly one location.

References between rows are plain foreign keys with no ON DELETE /
ON UPDATE action.  Deleting a referenced row is left to the engine to
reject, so the parent-side collections never touch child keys.
"""

from __future__ import annotations

from sqlalchemy import Column, String, Integer, ForeignKey
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import DeclarativeBase, relationship
from sqlalchemy.schema import CreateTable


class Base(DeclarativeBase):
    pass


class LocationType(Base):
    __tablename__ = "location_types"
    __table_args__ = {"sqlite_autoincrement": True}

    id   = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)

    locations = relationship(
        "Location", back_populates="location_type", passive_deletes="all",
    )

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name}

    def __repr__(self) -> str:
        return f"<LocationType {self.id} {self.name!r}>"


class Location(Base):
    __tablename__ = "locations"
    __table_args__ = {"sqlite_autoincrement": True}

    id               = Column(Integer, primary_key=True, autoincrement=True)
    name             = Column(String(255), nullable=False)
    barcode          = Column(String(255), nullable=True)
    location_type_id = Column(Integer, ForeignKey("location_types.id"),
                              nullable=False)

    location_type = relationship("LocationType", back_populates="locations")
    labwares = relationship(
        "Labware", back_populates="location", passive_deletes="all",
    )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "barcode": self.barcode,
            "location_type_id": self.location_type_id,
        }

    def __repr__(self) -> str:
        return f"<Location {self.id} {self.name!r}>"


class Labware(Base):
    __tablename__ = "labwares"
    __table_args__ = {"sqlite_autoincrement": True}

    id          = Column(Integer, primary_key=True, autoincrement=True)
    barcode     = Column(String(255), nullable=False)
    location_id = Column(Integer, ForeignKey("locations.id"), nullable=False)

    location = relationship("Location", back_populates="labwares")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "barcode": self.barcode,
            "location_id": self.location_id,
        }

    def __repr__(self) -> str:
        return f"<Labware {self.id} {self.barcode!r}>"


_DIALECTS = {
    "sqlite": sqlite.dialect,
    "postgresql": postgresql.dialect,
}


def dump_schema(dialect_name: str = "sqlite") -> str:
    """Render the CREATE TABLE statements, parents first."""
    try:
        dialect = _DIALECTS[dialect_name]()
    except KeyError:
        raise ValueError(f"Unsupported dialect: {dialect_name!r}") from None
    statements = [
        str(CreateTable(table).compile(dialect=dialect)).strip() + ";"
        for table in Base.metadata.sorted_tables
    ]
    return "\n\n".join(statements) + "\n"
