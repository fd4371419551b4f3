from __future__ import annotations

from uuid import UUID

import pytest
from sqlalchemy import select

from src.infrastructure.db.orm.client import ClientORM
from src.infrastructure.db.orm.user import UserORM
from src.infrastructure.repos.users_sqlalchemy import UsersSQLAlchemyRepository

CLIENT_PAYLOAD = {
    "phone": "0991234567",
    "birth_date": "1990-05-17",
    "gender": "female",
    "address": "Av. Quito 123",
}


async def create_client(client, headers) -> dict:
    response = await client.post("/api/v1/clients/", json=CLIENT_PAYLOAD, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


async def economic_status_ids(client, headers) -> dict[str, str]:
    response = await client.get("/api/v1/economic-statuses/", headers=headers)
    assert response.status_code == 200
    return {item["level"]: item["id"] for item in response.json()["data"]}


async def deleted_flags(app, client_id: str, user_id: UUID) -> tuple[bool, bool]:
    async with app.state.session_factory() as session:
        client_row = (
            await session.execute(select(ClientORM.deleted).where(ClientORM.id == UUID(client_id)))
        ).scalar_one()
        user_row = (
            await session.execute(select(UserORM.deleted).where(UserORM.id == user_id))
        ).scalar_one()
    return client_row, user_row


async def test_user_creates_a_single_client_with_default_status(client, headers, seeded_users):
    statuses = await economic_status_ids(client, headers["user"])
    assert list(statuses) == ["Ninguno", "Bajo", "Medio Bajo", "Medio", "Medio Alto", "Alto"]

    before = await client.get("/api/v1/clients/me/exists", headers=headers["user"])
    assert before.json()["data"] is False

    created = await create_client(client, headers["user"])
    assert created["user_id"] == str(seeded_users["user"])
    assert created["economic_status_id"] == statuses["Ninguno"]

    after = await client.get("/api/v1/clients/me/exists", headers=headers["user"])
    assert after.json()["data"] is True

    second = await client.post("/api/v1/clients/", json=CLIENT_PAYLOAD, headers=headers["user"])
    assert second.status_code == 409
    assert second.json()["message"] == "User already has a client"

    mine = await client.get("/api/v1/clients/me", headers=headers["user"])
    assert mine.json()["data"]["id"] == created["id"]


async def test_staff_cannot_hold_a_client_profile(client, headers):
    response = await client.post("/api/v1/clients/", json=CLIENT_PAYLOAD, headers=headers["admin"])
    assert response.status_code == 403


async def test_owner_cannot_change_economic_status(client, headers):
    statuses = await economic_status_ids(client, headers["user"])
    created = await create_client(client, headers["user"])

    denied = await client.patch(
        "/api/v1/clients/me",
        json={"economic_status_id": statuses["Bajo"]},
        headers=headers["user"],
    )
    assert denied.status_code == 403
    assert "economic_status_id" in denied.json()["message"]

    allowed = await client.patch(
        "/api/v1/clients/me", json={"phone": "0987654321"}, headers=headers["user"]
    )
    assert allowed.status_code == 200
    assert allowed.json()["data"]["phone"] == "0987654321"

    by_admin = await client.patch(
        f"/api/v1/clients/{created['id']}",
        json={"economic_status_id": statuses["Bajo"]},
        headers=headers["admin"],
    )
    assert by_admin.status_code == 200
    assert by_admin.json()["data"]["economic_status_id"] == statuses["Bajo"]


async def test_client_lookup_by_id_is_staff_only(client, headers):
    created = await create_client(client, headers["user"])

    by_moderator = await client.get(f"/api/v1/clients/{created['id']}", headers=headers["moderator"])
    assert by_moderator.status_code == 200

    by_owner = await client.get(f"/api/v1/clients/{created['id']}", headers=headers["user"])
    assert by_owner.status_code == 403

    listing = await client.get("/api/v1/clients/", headers=headers["moderator"])
    assert listing.json()["data"]["total_count"] == 1


async def test_removing_user_cascades_to_client_and_back(app, client, headers, seeded_users):
    created = await create_client(client, headers["other"])

    removed = await client.patch(
        f"/api/v1/users/{seeded_users['other']}/remove", headers=headers["admin"]
    )
    assert removed.status_code == 200
    assert removed.json()["data"]["linked"] == {"entity": "client", "id": created["id"]}
    assert await deleted_flags(app, created["id"], seeded_users["other"]) == (True, True)

    restored = await client.patch(
        f"/api/v1/clients/{created['id']}/restore", headers=headers["admin"]
    )
    assert restored.status_code == 200
    assert restored.json()["data"]["linked"] == {
        "entity": "user",
        "id": str(seeded_users["other"]),
    }
    assert await deleted_flags(app, created["id"], seeded_users["other"]) == (False, False)


async def test_owner_removes_own_client(app, client, headers, seeded_users):
    created = await create_client(client, headers["user"])

    response = await client.patch("/api/v1/clients/me/remove", headers=headers["user"])
    assert response.status_code == 200
    assert response.json()["message"] == "Your client has been removed"
    assert await deleted_flags(app, created["id"], seeded_users["user"]) == (True, True)


async def test_cascade_failure_leaves_both_records_active(
    app, client, headers, seeded_users, monkeypatch
):
    created = await create_client(client, headers["user"])

    async def refuse(self, record_id, deleted, *, expected=None):
        return False

    monkeypatch.setattr(UsersSQLAlchemyRepository, "set_deleted", refuse)

    response = await client.patch(
        f"/api/v1/clients/{created['id']}/remove", headers=headers["admin"]
    )
    assert response.status_code == 500
    assert response.json()["message"] == (
        "Linked user could not be updated; no changes were applied"
    )
    assert await deleted_flags(app, created["id"], seeded_users["user"]) == (False, False)


@pytest.mark.parametrize("field", ["phone", "birth_date", "gender"])
async def test_required_client_fields_cannot_be_cleared(client, headers, field):
    created = await create_client(client, headers["user"])

    response = await client.patch("/api/v1/clients/me", json={field: None}, headers=headers["user"])
    assert response.status_code == 422
    assert response.json()["type"] == "invalid"
    assert field in response.json()["message"]

    mine = await client.get("/api/v1/clients/me", headers=headers["user"])
    assert mine.json()["data"][field] == created[field]
