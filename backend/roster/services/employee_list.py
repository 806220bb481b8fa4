"""List views: the per-visit working list of employees and its mutations.

A list view combines two sources. The shared ``EmployeeStore`` holds the
employees created during this process's lifetime. The working list starts as
a copy of the store, is replaced by the remote list once the single fetch
issued on ``open()`` completes, and is overwritten with the store's contents
again on every store change. Remote-only records therefore disappear as soon
as an employee is created. This mirrors the behaviour of the list page this
service replaces.

Promote, demote and field updates only ever touch the working list.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
import uuid
from datetime import date
from typing import Callable

from roster.models.employee import ROLE_LADDER, Employee, EmployeeUpdate, ListViewState
from roster.services.employee_api import EmployeeApiClient
from roster.services.employee_store import EmployeeStore
from roster.services.tenure import to_card

logger = logging.getLogger(__name__)


def _rung(role: str) -> int:
    # Roles outside the ladder sit below it, at -1
    try:
        return ROLE_LADDER.index(role)
    except ValueError:
        return -1


def promoted_role(role: str) -> str:
    return ROLE_LADDER[min(_rung(role) + 1, len(ROLE_LADDER) - 1)]


def demoted_role(role: str) -> str:
    return ROLE_LADDER[max(_rung(role) - 1, 0)]


class EmployeeListView:
    def __init__(self, store: EmployeeStore, api: EmployeeApiClient, view_id: str | None = None) -> None:
        self.id = view_id or uuid.uuid4().hex
        self.store = store
        self.api = api
        self.working: list[Employee] = []
        self.loading = True
        self.closed = False
        self._fetch_task: asyncio.Task[None] | None = None
        self._unsubscribe: Callable[[], None] | None = None

    def open(self) -> None:
        """Subscribe to the store and start the one remote fetch of this view.

        Must be called from a running event loop.
        """
        if self._unsubscribe is not None or self.closed:
            return
        self._unsubscribe = self.store.subscribe(self._on_store_change)
        self._on_store_change(self.store.employees)
        self._fetch_task = asyncio.create_task(self.load(), name=f"list-view-fetch-{self.id}")

    async def load(self) -> None:
        try:
            employees = await self.api.fetch_employees()
        except Exception:
            logger.exception("Error fetching employees for list view %s", self.id)
        else:
            if not self.closed:
                self.working = list(employees)
                logger.info("List view %s loaded %d remote employees", self.id, len(employees))
        finally:
            self.loading = False

    async def wait_loaded(self) -> None:
        if self._fetch_task is not None:
            with contextlib.suppress(asyncio.CancelledError):
                await self._fetch_task

    async def close(self) -> None:
        self.closed = True
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        if self._fetch_task is not None and not self._fetch_task.done():
            self._fetch_task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._fetch_task
        self._fetch_task = None

    def _on_store_change(self, employees: tuple[Employee, ...]) -> None:
        self.working = list(employees)

    @property
    def combined(self) -> list[Employee]:
        return [*self.store.employees, *self.working]

    def promote(self, employee_id: int) -> None:
        self._replace(employee_id, lambda emp: emp.model_copy(update={"role": promoted_role(emp.role)}))

    def demote(self, employee_id: int) -> None:
        self._replace(employee_id, lambda emp: emp.model_copy(update={"role": demoted_role(emp.role)}))

    def update_fields(self, employee_id: int, update: EmployeeUpdate) -> None:
        changes = update.model_dump(exclude_unset=True, exclude_none=True)
        if "start_date" in changes:
            changes["start_date"] = changes["start_date"].isoformat()
        if not changes:
            return
        self._replace(employee_id, lambda emp: emp.model_copy(update=changes))

    def _replace(self, employee_id: int, change: Callable[[Employee], Employee]) -> None:
        self.working = [change(emp) if emp.id == employee_id else emp for emp in self.working]

    def state(self, today: date | None = None) -> ListViewState:
        today = today or date.today()
        return ListViewState(
            id=self.id,
            loading=self.loading,
            employees=[to_card(emp, today) for emp in self.combined],
        )


class ListViewRegistry:
    """Open list views, keyed by view id.

    At most ``max_views`` views stay open. Opening one more closes the view
    that was least recently opened or read, so abandoned views do not stay
    subscribed to the store.
    """

    def __init__(self, store: EmployeeStore, api: EmployeeApiClient, max_views: int = 100) -> None:
        self.store = store
        self.api = api
        self.max_views = max_views
        self._views: dict[str, EmployeeListView] = {}

    def __len__(self) -> int:
        return len(self._views)

    async def open(self) -> EmployeeListView:
        while self._views and len(self._views) >= self.max_views:
            oldest = next(iter(self._views))
            logger.info("Evicting list view %s (max_views=%d)", oldest, self.max_views)
            await self.close(oldest)

        view = EmployeeListView(self.store, self.api)
        self._views[view.id] = view
        view.open()
        logger.info("List view %s opened", view.id)
        return view

    def get(self, view_id: str) -> EmployeeListView:
        view = self._views.pop(view_id)
        # Re-insert as most recently used
        self._views[view_id] = view
        return view

    async def close(self, view_id: str) -> bool:
        view = self._views.pop(view_id, None)
        if view is None:
            return False
        await view.close()
        logger.info("List view %s closed", view_id)
        return True

    async def close_all(self) -> None:
        for view_id in list(self._views):
            await self.close(view_id)
