from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from roster.services.employee_api import EmployeeApiError
from roster.services.employee_detail import NO_WORK_HISTORY_MESSAGE, load_employee_detail


@pytest.mark.anyio
async def test_detail_success(employee_factory):
    employee = employee_factory(4)
    api = MagicMock()
    api.fetch_employee = AsyncMock(return_value=employee)

    detail = await load_employee_detail(api, 4)

    assert detail.loading is False
    assert detail.error is None
    assert detail.employee == employee
    api.fetch_employee.assert_awaited_once_with(4)


@pytest.mark.anyio
@pytest.mark.parametrize(
    "error",
    [EmployeeApiError(500, "Internal Server Error"), RuntimeError("not initialized"), ValueError("bad json")],
)
async def test_detail_failure_shows_fixed_message(error):
    api = MagicMock()
    api.fetch_employee = AsyncMock(side_effect=error)

    detail = await load_employee_detail(api, 4)

    assert detail.loading is False
    assert detail.employee is None
    assert detail.error == NO_WORK_HISTORY_MESSAGE == "No work history found of this employee."


@pytest.mark.anyio
async def test_detail_empty_body():
    api = MagicMock()
    api.fetch_employee = AsyncMock(return_value=None)

    detail = await load_employee_detail(api, 4)

    assert detail.employee is None
    assert detail.error is None
