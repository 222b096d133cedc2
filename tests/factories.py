import factory
from factory.alchemy import SQLAlchemyModelFactory

from db.models import LocationType, Location, Labware


class LocationTypeFactory(SQLAlchemyModelFactory):
    """Factory for creating LocationType rows."""

    class Meta:
        model = LocationType
        sqlalchemy_session_persistence = "commit"

    name = factory.Faker("random_element", elements=["Freezer", "Shelf", "Box", "Rack"])


class LocationFactory(SQLAlchemyModelFactory):
    """Factory for creating Location rows, each with its own LocationType."""

    class Meta:
        model = Location
        sqlalchemy_session_persistence = "commit"

    name = factory.Sequence(lambda n: f"Location {n}")
    barcode = factory.Sequence(lambda n: f"LOC-{n:03d}")
    location_type = factory.SubFactory(LocationTypeFactory)


class LabwareFactory(SQLAlchemyModelFactory):
    """Factory for creating Labware rows stored in a fresh Location."""

    class Meta:
        model = Labware
        sqlalchemy_session_persistence = "commit"

    barcode = factory.Sequence(lambda n: f"LW-{n}")
    location = factory.SubFactory(LocationFactory)


ALL_FACTORIES = (LocationTypeFactory, LocationFactory, LabwareFactory)


def bind_session(session):
    """Point every factory at the test's session."""
    for factory_class in ALL_FACTORIES:
        factory_class._meta.sqlalchemy_session = session
