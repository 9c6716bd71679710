"""API tests for user endpoints."""

import uuid

from tests.shared.fixtures.api import USERS_URL, signup

KANDY_ADDRESS = {
    "street": "12 Main St",
    "city": "Kandy",
    "district": "Kandy",
    "province": "Central",
    "postalCode": "20000",
}


def _user_body(**overrides) -> dict:
    body = {
        "firstName": "Nimal",
        "lastName": "Perera",
        "email": "nimal@example.lk",
        "phoneNumber": "0771234567",
        "password": "a-strong-password",
    }
    body.update(overrides)
    return body


class TestSignup:
    def test_created_without_password(self, client):
        response = client.post(f"{USERS_URL}/signup", json=_user_body())

        assert response.status_code == 201
        body = response.json()
        assert body["email"] == "nimal@example.lk"
        assert body["firstName"] == "Nimal"
        assert body["status"] == "unverified"
        assert body["address"] is None
        assert "password" not in body
        assert "passwordHash" not in body

    def test_email_is_normalized(self, client):
        response = client.post(
            f"{USERS_URL}/signup",
            json=_user_body(email="  Nimal@Example.LK "),
        )

        assert response.json()["email"] == "nimal@example.lk"

    def test_duplicate_email(self, client):
        signup(client, "nimal@example.lk")

        response = client.post(
            f"{USERS_URL}/signup",
            json=_user_body(email="NIMAL@example.lk"),
        )

        assert response.status_code == 409
        assert response.json()["code"] == "DUPLICATE_EMAIL"

    def test_short_password(self, client):
        response = client.post(f"{USERS_URL}/signup", json=_user_body(password="short"))

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_invalid_email(self, client):
        response = client.post(
            f"{USERS_URL}/signup",
            json=_user_body(email="not-an-email"),
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_EMAIL"

    def test_incomplete_address(self, client):
        response = client.post(
            f"{USERS_URL}/signup",
            json=_user_body(address={"street": "12 Main St", "city": "Kandy"}),
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_ADDRESS"


class TestUserQueries:
    def test_get_by_id_and_email(self, client):
        user = signup(client, "nimal@example.lk")

        by_id = client.get(f"{USERS_URL}/{user['id']}")
        by_email = client.get(f"{USERS_URL}/email/nimal@example.lk")

        assert by_id.status_code == 200
        assert by_email.json()["id"] == user["id"]

    def test_get_unknown(self, client):
        response = client.get(f"{USERS_URL}/{uuid.uuid4()}")

        assert response.status_code == 404
        assert response.json()["code"] == "USER_NOT_FOUND"

    def test_list_filters_by_district(self, client):
        signup(client, "nimal@example.lk", address=KANDY_ADDRESS)
        signup(client, "kamal@example.lk")

        response = client.get(USERS_URL, params={"district": "Kandy"})

        assert response.status_code == 200
        assert [u["email"] for u in response.json()] == ["nimal@example.lk"]

    def test_stats(self, client):
        signup(client, "nimal@example.lk", address=KANDY_ADDRESS)
        signup(client, "kamal@example.lk")

        stats = client.get(f"{USERS_URL}/stats").json()

        assert stats["totalUsers"] == 2
        assert stats["unverifiedUsers"] == 2
        assert stats["activeUsers"] == 0
        assert stats["usersByProvince"] == {"Central": 1}
        assert stats["usersByDistrict"] == {"Kandy": 1}


class TestUserUpdates:
    def test_update_address(self, client):
        user = signup(client, "nimal@example.lk")

        response = client.put(
            f"{USERS_URL}/{user['id']}",
            json={"address": KANDY_ADDRESS, "status": "active"},
        )

        assert response.status_code == 200
        assert response.json()["address"] == KANDY_ADDRESS
        assert response.json()["status"] == "active"

    def test_delete(self, client):
        user = signup(client, "nimal@example.lk")

        response = client.delete(f"{USERS_URL}/{user['id']}")

        assert response.status_code == 200
        assert response.json() == {
            "message": "User deleted successfully",
            "deletedUser": user["id"],
        }
        assert client.get(f"{USERS_URL}/{user['id']}").status_code == 404
