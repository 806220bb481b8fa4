from __future__ import annotations

from datetime import date

from roster.models.employee import Employee, EmployeeCard

ANNIVERSARY_MESSAGE = "🎉 Happy Work Anniversary! 🎉"
PROBATION_MESSAGE = "📝 Probation period review pending."


def _parse_start(start_date: str | None) -> date | None:
    if not start_date:
        return None
    try:
        return date.fromisoformat(start_date)
    except ValueError:
        return None


def years_worked(start: date, today: date) -> int:
    # Calendar-year difference, not elapsed full years
    return today.year - start.year


def anniversary_message(start: date, today: date) -> str:
    if (start.month, start.day) == (today.month, today.day):
        return ANNIVERSARY_MESSAGE
    if years_worked(start, today) < 1:
        return PROBATION_MESSAGE
    return ""


def to_card(employee: Employee, today: date) -> EmployeeCard:
    card = EmployeeCard(**employee.model_dump())
    start = _parse_start(employee.start_date)
    if start is None:
        return card
    card.years_worked = years_worked(start, today)
    card.anniversary_message = anniversary_message(start, today)
    return card
