"""Fixtures for HTTP and repository tests against a temporary SQLite database."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from blog.config import Settings
from blog.infrastructure.database import Database
from blog.main import create_app

ADMIN_NAME = "owner"
ADMIN_PASSWORD = "correct horse battery staple"


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        app_env="test",
        database_url=f"sqlite:///{tmp_path / 'blog.db'}",
        admin_username=ADMIN_NAME,
        admin_password=ADMIN_PASSWORD,
        admin_display_name="Owner",
    )


@pytest_asyncio.fixture
async def database(settings: Settings):
    db = Database(settings.database_url)
    await db.create_all()
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def client(settings: Settings, database: Database):
    """HTTP client for an app wired to the test database (lifespan not run)."""
    app = create_app(settings)
    app.state.database = database
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def admin_client(client: AsyncClient):
    response = await client.post(
        "/api/v1/auth/login", json={"name": ADMIN_NAME, "password": ADMIN_PASSWORD}
    )
    assert response.status_code == 200
    return client
