from __future__ import annotations

import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Response, status

from roster.core.dependencies import get_list_view, get_list_views
from roster.models.employee import ROLE_LADDER, EmployeeUpdate, ListViewState
from roster.services.employee_factory import ROLE_NOT_ON_LADDER_MESSAGE
from roster.services.employee_list import EmployeeListView, ListViewRegistry

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/views", tags=["views"])


@router.post("", response_model=ListViewState, status_code=status.HTTP_201_CREATED)
async def open_list_view(
    registry: ListViewRegistry = Depends(get_list_views),  # noqa: B008
):
    view = await registry.open()
    return view.state()


@router.get("/{view_id}", response_model=ListViewState)
async def get_list_view_state(
    wait: bool = False,
    view: EmployeeListView = Depends(get_list_view),  # noqa: B008
):
    if wait:
        await view.wait_loaded()
    return view.state()


@router.delete("/{view_id}", status_code=status.HTTP_204_NO_CONTENT)
async def close_list_view(
    view_id: str,
    registry: ListViewRegistry = Depends(get_list_views),  # noqa: B008
):
    if not await registry.close(view_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"List view '{view_id}' not found",
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{view_id}/employees/{employee_id}/promote", response_model=ListViewState)
async def promote_employee(
    employee_id: int,
    view: EmployeeListView = Depends(get_list_view),  # noqa: B008
):
    view.promote(employee_id)
    return view.state()


@router.post("/{view_id}/employees/{employee_id}/demote", response_model=ListViewState)
async def demote_employee(
    employee_id: int,
    view: EmployeeListView = Depends(get_list_view),  # noqa: B008
):
    view.demote(employee_id)
    return view.state()


@router.patch("/{view_id}/employees/{employee_id}", response_model=ListViewState)
async def update_employee(
    employee_id: int,
    update: EmployeeUpdate,
    view: EmployeeListView = Depends(get_list_view),  # noqa: B008
):
    errors: dict[str, str] = {}
    if update.role is not None and update.role not in ROLE_LADDER:
        errors["role"] = ROLE_NOT_ON_LADDER_MESSAGE
    if update.start_date is not None and update.start_date > date.today():
        errors["startDate"] = "Start date cannot be in the future"
    if errors:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=errors,
        )

    logger.info("Updating employee %s in list view %s", employee_id, view.id)
    view.update_fields(employee_id, update)
    return view.state()
