from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient
from starlette.testclient import TestClient

from app.core.config import Settings
from app.main import app
from app.services.employee_repository import EmployeeRepository


def _sqlite_url(path) -> str:
    return f"sqlite+aiosqlite:///{path}"


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def _database_settings(tmp_path):
    from app.core.config import settings

    original_url = settings.DATABASE_URL
    settings.DATABASE_URL = _sqlite_url(tmp_path / "employees.db")
    yield
    settings.DATABASE_URL = original_url


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def repository(tmp_path):
    repo = EmployeeRepository()
    await repo.initialize(Settings(DATABASE_URL=_sqlite_url(tmp_path / "repository.db")))
    yield repo
    await repo.close()


@pytest.fixture
def john_doe() -> dict:
    return {"firstName": "John", "lastNameFather": "Doe", "position": "Developer"}


@pytest.fixture
def jane_smith() -> dict:
    return {"firstName": "Jane", "lastNameFather": "Smith", "position": "Manager"}
