"""Employee models shared by the remote API client, the store and the list views."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

ROLE_LADDER: tuple[str, ...] = (
    "Intern",
    "Junior Developer",
    "Developer",
    "Senior Developer",
    "Lead Developer",
)

CITIES: tuple[str, ...] = ("Helsinki", "Oulu", "Tampere", "Kuopio", "Pori")

_CAMEL = ConfigDict(populate_by_name=True)


class WorkHistoryEntry(BaseModel):
    model_config = _CAMEL

    job_title: str = Field(alias="jobTitle")
    company: str
    start_date: str = Field(alias="startDate")
    end_date: str = Field(alias="endDate")


class Employee(BaseModel):
    """A single employee record, as served by the remote API."""

    model_config = _CAMEL

    id: int
    name: str
    role: str
    start_date: str = Field(alias="startDate")
    department: str
    city: str
    work_history: list[WorkHistoryEntry] = Field(default_factory=list, alias="workHistory")


class EmployeeCard(Employee):
    """Employee plus the tenure details shown on the list page."""

    years_worked: int = Field(default=0, alias="yearsWorked")
    anniversary_message: str = Field(default="", alias="anniversaryMessage")


class EmployeeCreate(BaseModel):
    """Create form input. Field checks live in ``collect_form_errors``."""

    model_config = _CAMEL

    name: str = ""
    role: str = ""
    start_date: date | None = Field(default=None, alias="startDate")
    department: str = ""
    city: str = ""


class EmployeeUpdate(BaseModel):
    """Edit form input. Only the fields explicitly sent are applied."""

    model_config = _CAMEL

    role: str | None = None
    department: str | None = None
    city: str | None = None
    start_date: date | None = Field(default=None, alias="startDate")


class ListViewState(BaseModel):
    id: str
    loading: bool
    employees: list[EmployeeCard] = []


class EmployeeDetailState(BaseModel):
    loading: bool = False
    employee: Employee | None = None
    error: str | None = None
