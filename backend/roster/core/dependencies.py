from __future__ import annotations

from fastapi import HTTPException, Request, status

from roster.services.employee_api import EmployeeApiClient, employee_api
from roster.services.employee_list import EmployeeListView, ListViewRegistry
from roster.services.employee_store import EmployeeStore


def get_employee_api() -> EmployeeApiClient:
    return employee_api


def get_employee_store(request: Request) -> EmployeeStore:
    return request.app.state.employee_store


def get_list_views(request: Request) -> ListViewRegistry:
    return request.app.state.list_views


def get_list_view(view_id: str, request: Request) -> EmployeeListView:
    try:
        return get_list_views(request).get(view_id)
    except KeyError as err:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"List view '{view_id}' not found",
        ) from err
