import config

from tests.factories import LabwareFactory, LocationFactory, LocationTypeFactory


def test_health_ok(client):
    """Test that the health check endpoint returns OK."""
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.get_json() == {"ok": True}


def test_create_and_read_scenario(client):
    """Freezer → Shelf A → LW-999, all id 1, all linked."""
    response = client.post("/api/v1/location_types", json={"name": "Freezer"})
    assert response.status_code == 201
    assert response.get_json() == {"id": 1, "name": "Freezer"}

    response = client.post("/api/v1/locations", json={
        "name": "Shelf A", "barcode": "LOC-001", "location_type_id": 1,
    })
    assert response.status_code == 201
    assert response.get_json()["id"] == 1

    response = client.post("/api/v1/labwares", json={
        "barcode": "LW-999", "location_id": 1,
    })
    assert response.status_code == 201
    assert response.get_json()["id"] == 1

    assert client.get("/api/v1/labwares/1").get_json() == {
        "id": 1, "barcode": "LW-999", "location_id": 1,
    }
    assert client.get("/api/v1/locations/1").get_json()["location_type_id"] == 1


def test_location_with_missing_type_is_rejected(client):
    response = client.post("/api/v1/locations", json={
        "name": "Shelf B", "location_type_id": 999,
    })
    assert response.status_code == 409
    assert response.get_json()["kind"] == "ReferentialIntegrityError"
    assert client.get("/api/v1/locations").get_json()["locations"] == []


def test_labware_with_missing_location_is_rejected(client):
    response = client.post("/api/v1/labwares", json={
        "barcode": "LW-1", "location_id": 999,
    })
    assert response.status_code == 409


def test_missing_required_fields(client, session):
    location = LocationFactory()

    response = client.post("/api/v1/location_types", json={})
    assert response.status_code == 400
    assert response.get_json()["kind"] == "ConstraintViolation"

    response = client.post("/api/v1/locations", json={
        "location_type_id": location.location_type_id,
    })
    assert response.status_code == 400
    assert response.get_json()["kind"] == "ConstraintViolation"

    response = client.post("/api/v1/labwares", json={"location_id": location.id})
    assert response.status_code == 400
    assert response.get_json()["kind"] == "ConstraintViolation"


def test_malformed_location_name(client, session):
    location_type = LocationTypeFactory()
    response = client.post("/api/v1/locations", json={
        "name": "A/location", "location_type_id": location_type.id,
    })
    assert response.status_code == 400
    assert response.get_json()["kind"] == "NameFormatError"


def test_non_object_body(client):
    response = client.post("/api/v1/location_types", json=["Freezer"])
    assert response.status_code == 400


def test_get_missing_rows(client):
    assert client.get("/api/v1/location_types/42").status_code == 404
    assert client.get("/api/v1/locations/42").status_code == 404
    assert client.get("/api/v1/labwares/42").status_code == 404


def test_lookup_by_barcode(client, session):
    location = LocationFactory(barcode="LOC-777")
    labware = LabwareFactory(barcode="LW-777", location=location)

    response = client.get("/api/v1/locations/barcode/LOC-777")
    assert response.status_code == 200
    assert response.get_json()["id"] == location.id

    response = client.get("/api/v1/labwares/barcode/LW-777")
    assert response.get_json()["location_id"] == location.id
    assert response.get_json()["id"] == labware.id

    assert client.get("/api/v1/locations/barcode/nope").status_code == 404
    assert client.get("/api/v1/labwares/barcode/nope").status_code == 404


def test_list_filters(client, session):
    location = LocationFactory()
    LabwareFactory(location=location)
    LabwareFactory(location=location)
    LabwareFactory()

    data = client.get(f"/api/v1/labwares?location_id={location.id}").get_json()
    assert len(data["labwares"]) == 2
    assert all(lw["location_id"] == location.id for lw in data["labwares"])

    data = client.get(
        f"/api/v1/locations?location_type_id={location.location_type_id}"
    ).get_json()
    assert [loc["id"] for loc in data["locations"]] == [location.id]

    data = client.get("/api/v1/location_types?limit=2").get_json()
    assert data["limit"] == 2
    assert len(data["location_types"]) == 2


def test_labware_without_location_goes_to_unknown(client):
    response = client.post("/api/v1/labwares", json={"barcode": "LW-1"})
    assert response.status_code == 201

    location_id = response.get_json()["location_id"]
    location = client.get(f"/api/v1/locations/{location_id}").get_json()
    assert location["name"] == "UNKNOWN"


def test_unknown_route_is_json_404(client):
    response = client.get("/nowhere")
    assert response.status_code == 404
    assert response.get_json() == {"error": "not found"}


def test_wrong_field_types_are_bad_requests(client, session):
    """Non-scalar or mistyped JSON fields answer 400, never 500."""
    location = LocationFactory()

    response = client.post("/api/v1/labwares", json={
        "barcode": {"a": 1}, "location_id": location.id,
    })
    assert response.status_code == 400
    assert response.get_json()["kind"] == "ConstraintViolation"

    response = client.post("/api/v1/locations", json={
        "name": "Shelf", "location_type_id": [location.location_type_id],
    })
    assert response.status_code == 400

    response = client.post("/api/v1/location_types", json={"name": {"en": "Freezer"}})
    assert response.status_code == 400

    response = client.post("/api/v1/labwares", json={
        "barcode": "LW-1", "location_id": str(location.id),
    })
    assert response.status_code == 400


def test_reserved_barcode_is_rejected(client, session):
    location_type = LocationTypeFactory()
    response = client.post("/api/v1/locations", json={
        "name": "My Freezer", "barcode": "lw-unknown",
        "location_type_id": location_type.id,
    })
    assert response.status_code == 400


def test_negative_paging_is_clamped(client, session):
    for _ in range(3):
        LocationTypeFactory()

    data = client.get("/api/v1/location_types?limit=-1").get_json()
    assert data["limit"] == 0
    assert data["location_types"] == []

    data = client.get("/api/v1/location_types?offset=-5").get_json()
    assert data["offset"] == 0
    assert len(data["location_types"]) == 3

    data = client.get(f"/api/v1/location_types?limit={config.API_MAX_LIMIT + 1}").get_json()
    assert data["limit"] == config.API_MAX_LIMIT
