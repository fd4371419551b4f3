from __future__ import annotations

import pytest


async def test_register_then_login_and_read_me(client):
    register = await client.post(
        "/api/v1/auth/register",
        json={"name": "Maria", "email": "Maria@Shelter.org", "password": "s3cret-pass"},
    )
    assert register.status_code == 201
    body = register.json()
    assert body["type"] == "success"
    assert body["data"]["role"] == "user"
    assert body["data"]["email"] == "maria@shelter.org"

    duplicate = await client.post(
        "/api/v1/auth/register",
        json={"name": "Maria", "email": "maria@shelter.org", "password": "s3cret-pass"},
    )
    assert duplicate.status_code == 409
    assert duplicate.json()["code"] == "duplicate"

    login = await client.post(
        "/api/v1/auth/login",
        json={"email": "maria@shelter.org", "password": "s3cret-pass"},
        headers={"X-Return-Refresh": "1"},
    )
    assert login.status_code == 200
    tokens = login.json()
    assert tokens["role"] == "user"
    assert tokens["refresh_token"]

    me = await client.get(
        "/api/v1/users/me", headers={"Authorization": f"Bearer {tokens['access_token']}"}
    )
    assert me.status_code == 200
    assert me.json()["data"]["name"] == "Maria"

    refreshed = await client.post(
        "/api/v1/auth/refresh", json={"refresh_token": tokens["refresh_token"]}
    )
    assert refreshed.status_code == 200
    assert refreshed.json()["access_token"]


async def test_wrong_password_and_missing_token(client, seeded_users):
    bad = await client.post(
        "/api/v1/auth/login", json={"email": "user@shelter.org", "password": "nope-nope"}
    )
    assert bad.status_code == 401
    assert bad.json()["code"] == "auth_error"

    anonymous = await client.get("/api/v1/users/me")
    assert anonymous.status_code == 401


async def test_refresh_token_is_not_an_access_token(client, app, seeded_users):
    refresh = app.state.jwt_service.create_refresh_token(subject=seeded_users["user"])
    response = await client.get(
        "/api/v1/users/me", headers={"Authorization": f"Bearer {refresh}"}
    )
    assert response.status_code == 401


async def test_deleted_user_cannot_login_or_authenticate(
    client, headers, seeded_users, test_password
):
    removed = await client.patch(
        f"/api/v1/users/{seeded_users['other']}/remove", headers=headers["admin"]
    )
    assert removed.status_code == 200

    login = await client.post(
        "/api/v1/auth/login", json={"email": "other@shelter.org", "password": test_password}
    )
    assert login.status_code == 401

    me = await client.get("/api/v1/users/me", headers=headers["other"])
    assert me.status_code == 401


async def test_role_assignment_is_admin_only(client, headers, seeded_users):
    self_promotion = await client.patch(
        f"/api/v1/users/{seeded_users['user']}", json={"role": "admin"}, headers=headers["user"]
    )
    assert self_promotion.status_code == 403

    moderator_try = await client.patch(
        f"/api/v1/users/{seeded_users['user']}",
        json={"role": "moderator"},
        headers=headers["moderator"],
    )
    assert moderator_try.status_code == 403

    promoted = await client.patch(
        f"/api/v1/users/{seeded_users['user']}",
        json={"role": "moderator"},
        headers=headers["admin"],
    )
    assert promoted.status_code == 200
    assert promoted.json()["data"]["role"] == "moderator"


async def test_admin_creates_user_with_role(client, headers):
    created = await client.post(
        "/api/v1/users/",
        json={
            "name": "Helper",
            "email": "helper@shelter.org",
            "password": "helper-pass",
            "role": "moderator",
        },
        headers=headers["admin"],
    )
    assert created.status_code == 201
    assert created.json()["data"]["role"] == "moderator"

    by_user = await client.post(
        "/api/v1/users/",
        json={"name": "X", "email": "x@shelter.org", "password": "helper-pass"},
        headers=headers["user"],
    )
    assert by_user.status_code == 403


async def test_users_read_only_themselves(client, headers, seeded_users):
    own = await client.get(f"/api/v1/users/{seeded_users['user']}", headers=headers["user"])
    assert own.status_code == 200

    foreign = await client.get(f"/api/v1/users/{seeded_users['other']}", headers=headers["user"])
    assert foreign.status_code == 403
    assert foreign.json()["type"] == "unauthorized"

    listing = await client.get("/api/v1/users/", headers=headers["admin"])
    assert listing.status_code == 200
    assert listing.json()["data"]["total_count"] == 4


async def test_moderator_cannot_list_or_read_users(client, headers, seeded_users):
    listing = await client.get("/api/v1/users/", headers=headers["moderator"])
    assert listing.status_code == 403

    lookup = await client.get(
        f"/api/v1/users/{seeded_users['user']}", headers=headers["moderator"]
    )
    assert lookup.status_code == 403
    assert lookup.json()["type"] == "unauthorized"

    by_admin = await client.get(f"/api/v1/users/{seeded_users['user']}", headers=headers["admin"])
    assert by_admin.json()["data"]["email"] == "user@shelter.org"


@pytest.mark.parametrize("field", ["name", "email", "password"])
async def test_null_account_fields_are_rejected(
    client, headers, seeded_users, test_password, field
):
    response = await client.patch(
        f"/api/v1/users/{seeded_users['user']}", json={field: None}, headers=headers["user"]
    )
    assert response.status_code == 422
    assert response.json()["type"] == "invalid"

    me = await client.get("/api/v1/users/me", headers=headers["user"])
    assert me.json()["data"]["name"] == "User"
    login = await client.post(
        "/api/v1/auth/login", json={"email": "user@shelter.org", "password": test_password}
    )
    assert login.status_code == 200
