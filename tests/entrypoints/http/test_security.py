"""
Tests for the bearer-token gate.

Uses a throwaway route guarded by require_admin so the gate is exercised
independently of the product routes.
"""

from __future__ import annotations

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from storefront_lite.entrypoints.http.exception_handlers import register_exception_handlers
from storefront_lite.entrypoints.http.security import (
    Principal,
    get_current_principal,
    require_admin,
    require_role,
)


@pytest.fixture
def client() -> TestClient:
    app = FastAPI()
    register_exception_handlers(app)
    app.state.api_tokens = {"admin-token": "admin", "staff-token": "staff"}

    @app.get("/admin-only")
    def admin_only(principal: Principal = Depends(require_admin)) -> dict:
        return {"role": principal.role}

    @app.get("/staff-only", dependencies=[Depends(require_role("staff"))])
    def staff_only() -> dict:
        return {"ok": True}

    @app.get("/whoami")
    def whoami(principal: Principal = Depends(get_current_principal)) -> dict:
        return {"role": principal.role}

    return TestClient(app, raise_server_exceptions=False)


def test_admin_token_passes(client: TestClient) -> None:
    response = client.get("/admin-only", headers={"Authorization": "Bearer admin-token"})

    assert response.status_code == 200
    assert response.json() == {"role": "admin"}


def test_missing_header_is_401(client: TestClient) -> None:
    response = client.get("/admin-only")

    assert response.status_code == 401
    assert response.json()["error"] == "Access token required"


def test_non_bearer_scheme_is_401(client: TestClient) -> None:
    response = client.get("/admin-only", headers={"Authorization": "Basic dXNlcjpwYXNz"})

    assert response.status_code == 401


def test_unknown_token_is_401(client: TestClient) -> None:
    response = client.get("/admin-only", headers={"Authorization": "Bearer forged"})

    assert response.status_code == 401
    assert response.json()["error"] == "Invalid or expired token"


def test_wrong_role_is_403(client: TestClient) -> None:
    response = client.get("/admin-only", headers={"Authorization": "Bearer staff-token"})

    assert response.status_code == 403
    assert response.json()["code"] == "FORBIDDEN"


def test_custom_role(client: TestClient) -> None:
    assert client.get("/staff-only", headers={"Authorization": "Bearer staff-token"}).status_code == 200
    assert client.get("/staff-only", headers={"Authorization": "Bearer admin-token"}).status_code == 403


def test_principal_resolution(client: TestClient) -> None:
    response = client.get("/whoami", headers={"Authorization": "Bearer staff-token"})

    assert response.json() == {"role": "staff"}
