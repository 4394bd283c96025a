"""HTTP tests for login, logout and session status."""

import pytest
from httpx import AsyncClient

ADMIN_NAME = "owner"
ADMIN_PASSWORD = "correct horse battery staple"

LOGIN = "/api/v1/auth/login"
LOGOUT = "/api/v1/auth/logout"
SESSION = "/api/v1/auth/session"


@pytest.mark.asyncio
async def test_login_rejects_bad_credentials(client: AsyncClient):
    response = await client.post(LOGIN, json={"name": ADMIN_NAME, "password": "nope"})
    assert response.status_code == 401
    assert "session" not in response.cookies


@pytest.mark.asyncio
async def test_login_requires_both_fields(client: AsyncClient):
    response = await client.post(LOGIN, json={"name": ADMIN_NAME})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_login_sets_http_only_cookie(client: AsyncClient):
    response = await client.post(LOGIN, json={"name": ADMIN_NAME, "password": ADMIN_PASSWORD})
    assert response.status_code == 200
    assert response.json()["user"] == {"name": "Owner", "role": "admin"}

    set_cookie = response.headers["set-cookie"].lower()
    assert "session=" in set_cookie
    assert "httponly" in set_cookie
    assert "samesite=lax" in set_cookie


@pytest.mark.asyncio
async def test_session_status_round_trip(client: AsyncClient):
    anonymous = (await client.get(SESSION)).json()
    assert anonymous["authenticated"] is False

    await client.post(LOGIN, json={"name": ADMIN_NAME, "password": ADMIN_PASSWORD})
    status = (await client.get(SESSION)).json()
    assert status["authenticated"] is True
    assert status["user"]["role"] == "admin"
    assert status["expires_at"] is not None

    logout = await client.post(LOGOUT)
    assert logout.status_code == 200
    assert logout.json()["success"] is True

    assert (await client.get(SESSION)).json()["authenticated"] is False


@pytest.mark.asyncio
async def test_logout_without_session_succeeds(client: AsyncClient):
    response = await client.post(LOGOUT)
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_second_login_revokes_first_cookie(client: AsyncClient):
    first = await client.post(LOGIN, json={"name": ADMIN_NAME, "password": ADMIN_PASSWORD})
    old_token = first.cookies["session"]
    await client.post(LOGIN, json={"name": ADMIN_NAME, "password": ADMIN_PASSWORD})

    client.cookies.clear()
    stale = {"Cookie": f"session={old_token}"}
    assert (await client.get(SESSION, headers=stale)).json()["authenticated"] is False
    response = await client.post("/api/v1/articles", json={"title": "T", "content": "c"}, headers=stale)
    assert response.status_code == 401
