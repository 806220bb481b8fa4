"""Validation and construction of employees created through the create form."""

from __future__ import annotations

import time
from datetime import date

from roster.models.employee import CITIES, ROLE_LADDER, Employee, EmployeeCreate, WorkHistoryEntry

# Every new hire gets the same placeholder history
DEFAULT_WORK_HISTORY: tuple[WorkHistoryEntry, ...] = (
    WorkHistoryEntry(
        job_title="Intern Developer",
        company="TechCorp",
        start_date="2021-06-01",
        end_date="2022-01-15",
    ),
    WorkHistoryEntry(
        job_title="Junior Developer",
        company="InnovateX",
        start_date="2022-02-01",
        end_date="2023-01-14",
    ),
)


ROLE_NOT_ON_LADDER_MESSAGE = f"Role must be one of: {', '.join(ROLE_LADDER)}"


def collect_form_errors(form: EmployeeCreate, today: date) -> dict[str, str]:
    errors: dict[str, str] = {}

    if not form.name.strip():
        errors["name"] = "Name is required"

    if not form.role.strip():
        errors["role"] = "Role is required"
    elif form.role not in ROLE_LADDER:
        errors["role"] = ROLE_NOT_ON_LADDER_MESSAGE

    if not form.department.strip():
        errors["department"] = "Department is required"

    if not form.city.strip():
        errors["city"] = "City is required"
    elif form.city not in CITIES:
        errors["city"] = f"City must be one of: {', '.join(CITIES)}"

    if form.start_date is not None and form.start_date > today:
        errors["startDate"] = "Start date cannot be in the future"

    return errors


def new_employee_id() -> int:
    # Millisecond timestamp; collisions are possible and not guarded against
    return time.time_ns() // 1_000_000


def build_employee(form: EmployeeCreate, today: date, employee_id: int | None = None) -> Employee:
    start = form.start_date or today
    return Employee(
        id=employee_id if employee_id is not None else new_employee_id(),
        name=form.name,
        role=form.role,
        start_date=start.isoformat(),
        department=form.department,
        city=form.city,
        work_history=[entry.model_copy() for entry in DEFAULT_WORK_HISTORY],
    )
