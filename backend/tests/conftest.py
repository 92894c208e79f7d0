from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient
from starlette.testclient import TestClient

from staff_directory.core.config import Settings
from staff_directory.core.dependencies import get_directory_shell
from staff_directory.main import app
from staff_directory.models.employee import CreateEmployeeResult, EmployeeRecord
from staff_directory.services.directory_client import DirectoryClient
from staff_directory.services.directory_shell import DirectoryShell
from staff_directory.services.location_service import LocationService

SAMPLE_EMPLOYEES: list[dict] = [
    {
        "Hiring_TestID": "HT-1",
        "firstName": "Alice",
        "lastName": "Meyer",
        "email": "alice.meyer@example.com",
        "phoneNumber": "4915112345678",
        "employeeID": "E100",
        "city": "Berlin",
        "country": "Germany",
        "latitude": "52.520008",
        "longitude": "13.404954",
    },
    {
        "Hiring_TestID": "HT-2",
        "firstName": "Bruno",
        "lastName": "Costa",
        "email": "bruno.costa@example.com",
        "phoneNumber": "351912345678",
        "employeeID": "E101",
        "city": "Lisbon",
        "country": "Portugal",
        "latitude": "91",
        "longitude": "0",
    },
    {
        "Hiring_TestID": "HT-3",
        "firstName": "Chloe",
        "lastName": "Martin",
        "email": "chloe.martin@example.com",
        "phoneNumber": "33612345678",
        "employeeID": "E102",
        "city": "Paris",
        "country": "France",
        "latitude": "48.856613",
        "longitude": "2.352222",
    },
]


def make_records(raw: list[dict] | None = None) -> list[EmployeeRecord]:
    return [EmployeeRecord.model_validate(item) for item in (SAMPLE_EMPLOYEES if raw is None else raw)]


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def test_settings() -> Settings:
    return Settings(NOTIFICATION_AUTO_HIDE_MS=6000, TABLE_DEFAULT_PAGE_SIZE=10)


@pytest.fixture
def api_client():
    api = MagicMock(spec=DirectoryClient)
    api.list_employees = AsyncMock(return_value=make_records())
    api.create_employee = AsyncMock(return_value=CreateEmployeeResult(confirmation_id="HT-99"))
    return api


@pytest.fixture
def locator():
    loc = MagicMock(spec=LocationService)
    loc.get_current_position = AsyncMock(return_value=(12.0, 34.0))
    return loc


@pytest.fixture
def shell(api_client, locator, test_settings) -> DirectoryShell:
    return DirectoryShell(api_client, locator, test_settings)


@pytest.fixture
def client(shell):
    async def _mounted_shell() -> DirectoryShell:
        await shell.mount()
        return shell

    app.dependency_overrides[get_directory_shell] = _mounted_shell
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(shell):
    async def _mounted_shell() -> DirectoryShell:
        await shell.mount()
        return shell

    app.dependency_overrides[get_directory_shell] = _mounted_shell
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def sample_records() -> list[EmployeeRecord]:
    return make_records()
