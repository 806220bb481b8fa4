from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, status

from roster.core.dependencies import get_employee_api, get_employee_store
from roster.models.employee import Employee, EmployeeCreate
from roster.services.employee_api import EmployeeApiClient
from roster.services.employee_detail import EMPLOYEE_NOT_FOUND_MESSAGE, load_employee_detail
from roster.services.employee_factory import build_employee, collect_form_errors
from roster.services.employee_store import EmployeeStore

router = APIRouter(prefix="/employees", tags=["employees"])


@router.get("", response_model=list[Employee])
async def list_created_employees(
    store: EmployeeStore = Depends(get_employee_store),  # noqa: B008
):
    return list(store.employees)


@router.post("", response_model=Employee, status_code=status.HTTP_201_CREATED)
async def create_employee(
    form: EmployeeCreate,
    store: EmployeeStore = Depends(get_employee_store),  # noqa: B008
):
    today = date.today()
    errors = collect_form_errors(form, today)
    if errors:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=errors,
        )

    employee = build_employee(form, today)
    store.add_employee(employee)
    return employee


@router.get("/{employee_id}", response_model=Employee)
async def get_employee(
    employee_id: int,
    api: EmployeeApiClient = Depends(get_employee_api),  # noqa: B008
):
    detail = await load_employee_detail(api, employee_id)

    if detail.error:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail.error,
        )

    if not detail.employee:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=EMPLOYEE_NOT_FOUND_MESSAGE,
        )

    return detail.employee
