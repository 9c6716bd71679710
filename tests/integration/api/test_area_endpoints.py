"""API tests for area management endpoints."""

from tests.shared.fixtures.api import AREAS_URL

KANDY_AREA = {
    "name": "Kandy City",
    "district": "Kandy",
    "province": "Central",
    "areaType": "urban",
    "infrastructure": {
        "fiber": {"available": True, "technology": "FTTH", "maxSpeed": "100 Mbps"},
        "adsl": {"available": True, "technology": "ADSL2+"},
        "mobile": {"available": True, "technologies": ["4G", "5G"]},
    },
}


def test_create_records_creator(client):
    response = client.post(AREAS_URL, json=KANDY_AREA, headers={"X-User-ID": "ops-1"})

    assert response.status_code == 201
    body = response.json()
    assert body["createdBy"] == "ops-1"
    assert body["areaType"] == "urban"
    assert body["status"] == "active"
    assert body["infrastructure"]["fiber"]["maxSpeed"] == "100 Mbps"


def test_create_without_user_header(client):
    body = client.post(AREAS_URL, json=KANDY_AREA).json()

    assert body["createdBy"] == "system"


def test_duplicate_district(client):
    client.post(AREAS_URL, json=KANDY_AREA)

    response = client.post(AREAS_URL, json={**KANDY_AREA, "name": "Kandy South"})

    assert response.status_code == 409
    assert response.json()["code"] == "DUPLICATE_AREA"


def test_get_update_delete(client):
    area = client.post(AREAS_URL, json=KANDY_AREA).json()

    assert client.get(f"{AREAS_URL}/{area['id']}").json()["name"] == "Kandy City"

    updated = client.put(f"{AREAS_URL}/{area['id']}", json={"status": "planned"})
    assert updated.status_code == 200
    assert updated.json()["status"] == "planned"

    deleted = client.delete(f"{AREAS_URL}/{area['id']}")
    assert deleted.status_code == 200
    assert deleted.json()["message"] == "Area deleted successfully"
    assert client.get(f"{AREAS_URL}/{area['id']}").status_code == 404


def test_get_unknown(client):
    response = client.get(f"{AREAS_URL}/missing")

    assert response.status_code == 404
    assert response.json()["code"] == "AREA_NOT_FOUND"


def test_stats(client):
    client.post(AREAS_URL, json=KANDY_AREA)
    client.post(
        AREAS_URL,
        json={
            "name": "Jaffna",
            "district": "Jaffna",
            "province": "Northern",
            "areaType": "rural",
            "status": "planned",
        },
    )

    stats = client.get(f"{AREAS_URL}/stats").json()

    assert stats["totalAreas"] == 2
    assert stats["activeAreas"] == 1
    assert stats["plannedAreas"] == 1
    assert stats["areasByProvince"] == {"Central": 1, "Northern": 1}
    assert stats["areasByType"] == {"urban": 1, "rural": 1}
    assert stats["infrastructure"]["fiberAreas"] == 1
