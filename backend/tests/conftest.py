from __future__ import annotations

import pytest
from starlette.testclient import TestClient

from roster.main import app
from roster.models.employee import Employee


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def _offline_settings():
    from roster.core.config import settings

    original_url = settings.EMPLOYEE_API_URL
    settings.EMPLOYEE_API_URL = ""
    yield
    settings.EMPLOYEE_API_URL = original_url


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def make_employee(employee_id: int = 1, **overrides) -> Employee:
    data = {
        "id": employee_id,
        "name": f"Employee {employee_id}",
        "role": "Intern",
        "startDate": "2021-03-15",
        "department": "Engineering",
        "city": "Helsinki",
        "workHistory": [
            {
                "jobTitle": "Trainee",
                "company": "Nokia",
                "startDate": "2019-01-01",
                "endDate": "2020-12-31",
            }
        ],
    }
    data.update(overrides)
    return Employee.model_validate(data)


@pytest.fixture
def employee_factory():
    return make_employee
