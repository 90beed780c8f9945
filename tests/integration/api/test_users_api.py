import pytest
from httpx import AsyncClient

from chapterhub.domain.entities import Role, User
from tests.integration.helpers import auth_headers, reload


@pytest.mark.asyncio
async def test_state_director_lists_only_own_state(client: AsyncClient, seed, make_user):
    director = await make_user("sd@example.com", Role.STATE_DIRECTOR, seed.state_id)
    local = await make_user("local@example.com", state_id=seed.state_id, city_id=seed.city_id)
    await make_user("far@example.com", state_id=seed.other_state_id, city_id=seed.other_city_id)
    await make_user("nowhere@example.com")

    response = await client.get(
        "/api/users", headers=auth_headers(director, Role.STATE_DIRECTOR, seed.state_id)
    )

    assert response.status_code == 200
    ids = {u["id"] for u in response.json()["items"]}
    assert ids == {str(director), str(local)}


@pytest.mark.asyncio
async def test_secretary_lists_nobody(client: AsyncClient, seed, make_user):
    secretary = await make_user("sec@example.com", Role.SECRETARY, seed.state_id, seed.city_id)

    response = await client.get(
        "/api/users", headers=auth_headers(secretary, Role.SECRETARY, seed.state_id, seed.city_id)
    )

    assert response.json()["items"] == []
    assert response.json()["total"] == 0


@pytest.mark.asyncio
async def test_assign_role_and_audit_trail(client: AsyncClient, db_session, seed, make_user):
    admin = await make_user("sa@example.com", Role.SUPER_ADMIN)
    target = await make_user("future-sd@example.com")
    headers = auth_headers(admin, Role.SUPER_ADMIN)

    response = await client.patch(
        f"/api/users/{target}/role",
        json={"role": "STATE_DIRECTOR", "state_id": str(seed.state_id)},
        headers=headers,
    )

    assert response.status_code == 200
    assert response.json()["old_role"] == "USER"
    promoted = await reload(db_session, User, target)
    assert promoted.role == Role.STATE_DIRECTOR
    assert promoted.state_id == seed.state_id

    logs = await client.get("/api/audit-logs", headers=headers)
    assert logs.status_code == 200
    entry = logs.json()["logs"][0]
    assert entry["action"] == "ROLE_ASSIGNED"
    assert entry["performer_email"] == "sa@example.com"
    assert entry["details"]["new_role"] == "STATE_DIRECTOR"


@pytest.mark.asyncio
async def test_audit_logs_are_super_admin_only(client: AsyncClient, seed, make_user):
    director = await make_user("sd@example.com", Role.STATE_DIRECTOR, seed.state_id)

    response = await client.get(
        "/api/audit-logs", headers=auth_headers(director, Role.STATE_DIRECTOR, seed.state_id)
    )

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_self_assignment_is_forbidden(client: AsyncClient, seed, make_user):
    director = await make_user("sd@example.com", Role.STATE_DIRECTOR, seed.state_id)

    response = await client.patch(
        f"/api/users/{director}/role",
        json={"role": "CITY_DIRECTOR", "state_id": str(seed.state_id), "city_id": str(seed.city_id)},
        headers=auth_headers(director, Role.STATE_DIRECTOR, seed.state_id),
    )

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_deactivate_and_reactivate(client: AsyncClient, db_session, seed, make_user):
    director = await make_user("sd@example.com", Role.STATE_DIRECTOR, seed.state_id)
    user = await make_user("u@example.com", state_id=seed.state_id, city_id=seed.city_id)
    headers = auth_headers(director, Role.STATE_DIRECTOR, seed.state_id)

    deactivated = await client.post(f"/api/users/{user}/deactivate", headers=headers)
    assert deactivated.status_code == 200
    assert deactivated.json()["user"]["is_active"] is False

    activated = await client.post(f"/api/users/{user}/activate", headers=headers)
    assert activated.status_code == 200
    assert (await reload(db_session, User, user)).is_active is True


@pytest.mark.asyncio
async def test_search_addable_users(client: AsyncClient, seed, make_user):
    director = await make_user("cd@example.com", Role.CITY_DIRECTOR, seed.state_id, seed.city_id)
    await make_user("annabel@example.com")
    headers = auth_headers(director, Role.CITY_DIRECTOR, seed.state_id, seed.city_id)

    short = await client.get("/api/users/search?q=a", headers=headers)
    found = await client.get("/api/users/search?q=ANNA", headers=headers)

    assert short.json() == []
    assert [u["email"] for u in found.json()] == ["annabel@example.com"]
