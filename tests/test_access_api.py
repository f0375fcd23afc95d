# tests/test_access_api.py

"""
Tests for the /access endpoints.
"""

from fastapi.testclient import TestClient

from core.cache import get_cache
from dependencies.auth import get_current_user, get_optional_user


def as_user(app, user):
    app.dependency_overrides[get_optional_user] = lambda: user
    app.dependency_overrides[get_current_user] = lambda: user


def test_admin_contract_actions(app, client: TestClient, admin_user):
    as_user(app, admin_user)

    response = client.get("/access/actions/contracts")

    assert response.status_code == 200
    assert response.json() == {
        "view": True, "create": True, "edit": True,
        "delete": True, "export": True, "manage": True,
    }


def test_renter_expense_actions(app, client: TestClient, renter_user):
    as_user(app, renter_user)

    response = client.get("/access/actions/expenses")

    assert response.status_code == 200
    assert not any(response.json().values())


def test_anonymous_actions_without_token(client: TestClient):
    response = client.get("/access/actions/contracts")

    assert response.status_code == 200
    assert not any(response.json().values())


def test_unknown_resource_type_is_denied_not_404(app, client: TestClient, admin_user):
    as_user(app, admin_user)

    response = client.get("/access/actions/buildings")

    assert response.status_code == 200
    assert not any(response.json().values())


def test_navigation_for_renter(app, client: TestClient, renter_user):
    as_user(app, renter_user)

    response = client.get("/access/navigation")

    assert response.status_code == 200
    assert [item["name"] for item in response.json()] == ["Dashboard", "My Contract", "My Payments", "Maintenance"]
    assert response.json()[0] == {
        "name": "Dashboard", "href": "/dashboard", "icon": "Home", "roles": ["ADMIN", "RENTER"],
    }


def test_navigation_anonymous(client: TestClient):
    response = client.get("/access/navigation")

    assert response.status_code == 200
    assert response.json() == []


def test_ownership(app, client: TestClient, renter_user):
    as_user(app, renter_user)

    assert client.get("/access/ownership/2").json() == {"owner_id": "2", "allowed": True}
    assert client.get("/access/ownership/3").json() == {"owner_id": "3", "allowed": False}


def test_admin_clears_user_cache(app, client: TestClient, admin_user, renter_user):
    as_user(app, renter_user)
    client.get("/access/actions/contracts")

    as_user(app, admin_user)
    response = client.delete(f"/access/cache/{renter_user.id}")

    assert response.status_code == 200
    assert response.json() == {"success": True, "removed": 1}


def test_renter_cannot_clear_cache(app, client: TestClient, renter_user):
    as_user(app, renter_user)

    response = client.delete("/access/cache/1")

    assert response.status_code == 403
    assert response.json()["detail"] == "Insufficient permissions: 'system:user_management' required"


def test_junk_resource_types_do_not_grow_cache(app, client: TestClient, renter_user):
    as_user(app, renter_user)

    for i in range(100):
        response = client.get(f"/access/actions/junk{i}")
        assert response.json()["view"] is False

    assert get_cache().size() == 0
