"""Client for the remote employee API (read-only)."""

from __future__ import annotations

import logging

import aiohttp

from roster.core.config import Settings
from roster.models.employee import Employee

logger = logging.getLogger(__name__)


class EmployeeApiError(RuntimeError):
    def __init__(self, status: int, body: str) -> None:
        super().__init__(f"Employee API request failed: {status} - {body}")
        self.status = status
        self.body = body


class EmployeeApiClient:
    def __init__(self) -> None:
        self.initialized = False
        self.base_url = ""
        self.timeout = 30.0

    async def initialize(self, settings: Settings) -> None:
        if self.initialized:
            return

        if not settings.EMPLOYEE_API_URL:
            logger.warning("Employee API URL missing, EmployeeApiClient not initialized")
            return

        self.base_url = settings.EMPLOYEE_API_URL.rstrip("/")
        self.timeout = settings.EMPLOYEE_API_TIMEOUT
        self.initialized = True
        logger.info("EmployeeApiClient initialized (base_url=%s)", self.base_url)

    async def close(self) -> None:
        self.initialized = False
        self.base_url = ""

    async def fetch_employees(self) -> list[Employee]:
        data = await self._get_json("/")
        return [Employee.model_validate(item) for item in (data or {}).get("employees", [])]

    async def fetch_employee(self, employee_id: int) -> Employee | None:
        data = await self._get_json(f"/{employee_id}")
        if not data:
            return None
        return Employee.model_validate(data)

    async def check_connection(self) -> bool:
        if not self.initialized:
            return False

        try:
            timeout = aiohttp.ClientTimeout(total=10)
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(f"{self.base_url}/") as response:
                    return response.status == 200
        except Exception:
            logger.exception("EmployeeApiClient connection check failed")
            return False

    async def _get_json(self, path: str):
        if not self.initialized:
            raise RuntimeError("EmployeeApiClient not initialized")

        url = f"{self.base_url}{path}"
        timeout = aiohttp.ClientTimeout(total=self.timeout)
        async with aiohttp.ClientSession(timeout=timeout) as session:
            async with session.get(url, headers={"Accept": "application/json"}) as response:
                if response.status == 200:
                    return await response.json()

                error_text = await response.text()
                raise EmployeeApiError(response.status, error_text)


employee_api = EmployeeApiClient()
