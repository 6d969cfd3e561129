"""Integration tests for the registration endpoints.

Drives the HTTP API end to end:
1. User and business registration (201)
2. Entity rejections reported as 400 INVALID_ARGUMENT with the reason
3. Malformed bodies reported as 422 VALIDATION_ERROR
"""

import uuid

import pytest
from fastapi.testclient import TestClient

from marketplace.application.services.account_service import AccountService
from marketplace.domain.exceptions import ValidationNotDefinedException
from marketplace.main import app
from marketplace.presentation.dependencies import get_account_service
from tests.sample_data import BUSINESS_ID, USER_ID

pytestmark = pytest.mark.integration

USER_PAYLOAD = {
    "email": "rafael@example.com",
    "phone": "+5521999999999",
    "address": "Rua Dominguinhos, 10",
    "image_url": "http://images.example.com/profile.png",
    "password": "securepassword123",
}


def test_create_user(client: TestClient, password_hasher):
    """Test that a valid registration returns the new user."""
    # Act
    response = client.post("/api/v1/users", json=USER_PAYLOAD)

    # Assert
    assert response.status_code == 201
    assert response.json() == {
        "user_id": USER_ID,
        "email": "rafael@example.com",
        "phone": "+5521999999999",
        "address": "Rua Dominguinhos, 10",
        "image_url": "http://images.example.com/profile.png",
        "roles": ["user"],
    }
    assert password_hasher.hashed_passwords == ["securepassword123"]


def test_create_user_invalid_email(client: TestClient):
    # Act
    response = client.post("/api/v1/users", json={**USER_PAYLOAD, "email": "nope"})

    # Assert
    assert response.status_code == 400
    assert response.json() == {
        "detail": "Email is not valid",
        "error_code": "INVALID_ARGUMENT",
    }


@pytest.mark.parametrize(
    ("field", "value", "reason"),
    [
        ("phone", "999", "Phone is invalid"),
        ("image_url", "profile.png", "URL is not valid"),
    ],
)
def test_create_user_rejections(client: TestClient, field, value, reason):
    response = client.post("/api/v1/users", json={**USER_PAYLOAD, field: value})

    assert response.status_code == 400
    assert response.json()["detail"] == reason


def test_create_user_missing_field(client: TestClient):
    """A body without a required field never reaches the service."""
    # Arrange
    payload = {key: value for key, value in USER_PAYLOAD.items() if key != "password"}

    # Act
    response = client.post("/api/v1/users", json=payload)

    # Assert
    assert response.status_code == 422
    body = response.json()
    assert body["detail"] == "Validation failed"
    assert body["error_code"] == "VALIDATION_ERROR"
    assert body["errors"][0]["field"] == "body.password"


def test_create_user_wrong_type(client: TestClient):
    response = client.post("/api/v1/users", json={**USER_PAYLOAD, "email": 42})

    assert response.status_code == 422
    assert response.json()["errors"][0]["field"] == "body.email"


def test_create_business(client: TestClient):
    """Test that a business is created together with its owner."""
    # Act
    response = client.post(
        "/api/v1/businesses",
        json={**USER_PAYLOAD, "email": "owner@example.com"},
    )

    # Assert
    assert response.status_code == 201
    data = response.json()
    assert data["user_id"] == USER_ID
    assert data["business_id"] == BUSINESS_ID
    assert data["email"] == "owner@example.com"
    assert data["roles"] == ["business"]


def test_create_business_invalid_owner(client: TestClient):
    response = client.post("/api/v1/businesses", json={**USER_PAYLOAD, "phone": "abc"})

    assert response.status_code == 400
    assert response.json() == {
        "detail": "Phone is invalid",
        "error_code": "INVALID_ARGUMENT",
    }


def test_production_wiring(real_client: TestClient):
    """Random UUIDs and Argon2 hashing behind the real dependencies."""
    # Act
    response = real_client.post("/api/v1/businesses", json=USER_PAYLOAD)

    # Assert
    assert response.status_code == 201
    data = response.json()
    assert uuid.UUID(data["user_id"]).version == 4
    assert uuid.UUID(data["business_id"]).version == 4
    assert data["user_id"] != data["business_id"]


def test_unhandled_domain_exception_maps_by_error_code(client: TestClient):
    """Domain errors the service does not translate still get a status."""

    class RefusingService(AccountService):
        def create_user(self, dto):
            raise ValidationNotDefinedException("Order")

    app.dependency_overrides[get_account_service] = lambda: RefusingService(None, None)

    # Act
    response = client.post("/api/v1/users", json=USER_PAYLOAD)

    # Assert
    assert response.status_code == 501
    assert response.json() == {
        "detail": "Order validation rules are not defined",
        "error_code": "VALIDATION_NOT_DEFINED",
    }


def test_unexpected_error_returns_500(client: TestClient):
    class BrokenService(AccountService):
        def create_user(self, dto):
            raise RuntimeError("boom")

    app.dependency_overrides[get_account_service] = lambda: BrokenService(None, None)

    with TestClient(app, raise_server_exceptions=False) as quiet_client:
        response = quiet_client.post("/api/v1/users", json=USER_PAYLOAD)

    assert response.status_code == 500
    assert response.json() == {
        "detail": "An internal server error occurred",
        "error_code": "INTERNAL_SERVER_ERROR",
    }


def test_health_check(client: TestClient):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["status"] == "running"


def test_openapi_documents_validation_errors(client: TestClient):
    # Act
    schema = client.get("/openapi.json").json()

    # Assert
    responses = schema["paths"]["/api/v1/users"]["post"]["responses"]
    assert set(responses) >= {"201", "400", "422"}
    assert "ValidationErrorResponse" in schema["components"]["schemas"]
    assert "HTTPValidationError" not in schema["components"]["schemas"]


def test_config_exposes_only_non_sensitive_fields(client: TestClient):
    response = client.get("/config")

    assert response.status_code == 200
    assert set(response.json()) == {
        "environment",
        "app_name",
        "app_version",
        "debug",
        "cors_origins",
        "log_level",
    }
