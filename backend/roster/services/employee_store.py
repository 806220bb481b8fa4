"""Session-lifetime store of employees created through the API."""

from __future__ import annotations

import logging
from typing import Callable

from roster.models.employee import Employee

logger = logging.getLogger(__name__)

StoreListener = Callable[[tuple[Employee, ...]], None]


class EmployeeStore:
    def __init__(self) -> None:
        self._employees: tuple[Employee, ...] = ()
        self._listeners: list[StoreListener] = []

    @property
    def employees(self) -> tuple[Employee, ...]:
        return self._employees

    def add_employee(self, employee: Employee) -> None:
        # Always a new tuple, so listeners can compare snapshots by identity
        self._employees = (*self._employees, employee)
        logger.info("Employee %s added to store (size=%d)", employee.id, len(self._employees))
        self._notify()

    def subscribe(self, listener: StoreListener) -> Callable[[], None]:
        """Register ``listener`` for store changes.

        Listeners are called synchronously with the new sequence, in the
        order they subscribed. The returned callable removes the listener
        and is safe to call more than once.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        snapshot = self._employees
        for listener in list(self._listeners):
            listener(snapshot)
