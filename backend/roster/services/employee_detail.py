from __future__ import annotations

import logging

from roster.models.employee import EmployeeDetailState
from roster.services.employee_api import EmployeeApiClient

logger = logging.getLogger(__name__)

NO_WORK_HISTORY_MESSAGE = "No work history found of this employee."
EMPLOYEE_NOT_FOUND_MESSAGE = "Employee not found."


async def load_employee_detail(api: EmployeeApiClient, employee_id: int) -> EmployeeDetailState:
    """Fetch one employee, including work history, from the remote API.

    Any failure collapses into ``NO_WORK_HISTORY_MESSAGE``; the state returned
    is never loading.
    """
    try:
        employee = await api.fetch_employee(employee_id)
    except Exception:
        logger.exception("No work history found for employee %s", employee_id)
        return EmployeeDetailState(loading=False, error=NO_WORK_HISTORY_MESSAGE)

    return EmployeeDetailState(loading=False, employee=employee)
