from __future__ import annotations

from datetime import date

from roster.services.tenure import (
    ANNIVERSARY_MESSAGE,
    PROBATION_MESSAGE,
    anniversary_message,
    to_card,
    years_worked,
)


def test_years_worked_is_calendar_year_difference():
    assert years_worked(date(2020, 12, 31), date(2021, 1, 1)) == 1
    assert years_worked(date(2020, 1, 1), date(2026, 10, 19)) == 6


def test_anniversary_on_same_day_and_month():
    assert anniversary_message(date(2018, 10, 19), date(2026, 10, 19)) == ANNIVERSARY_MESSAGE


def test_probation_within_first_calendar_year():
    assert anniversary_message(date(2026, 3, 1), date(2026, 10, 19)) == PROBATION_MESSAGE


def test_start_day_is_an_anniversary():
    assert anniversary_message(date(2026, 10, 19), date(2026, 10, 19)) == ANNIVERSARY_MESSAGE


def test_no_message_for_regular_day():
    assert anniversary_message(date(2018, 5, 2), date(2026, 10, 19)) == ""


def test_to_card_keeps_employee_fields(employee_factory):
    employee = employee_factory(3, startDate="2024-10-19")

    card = to_card(employee, date(2026, 1, 5))

    assert card.id == 3
    assert card.work_history == employee.work_history
    assert card.years_worked == 2
    assert card.anniversary_message == ""


def test_to_card_unparseable_start_date(employee_factory):
    card = to_card(employee_factory(3, startDate="not-a-date"), date(2026, 1, 5))

    assert card.years_worked == 0
    assert card.anniversary_message == ""


def test_card_serializes_with_camel_case(employee_factory):
    card = to_card(employee_factory(3, startDate="2025-10-19"), date(2026, 10, 19))

    data = card.model_dump(by_alias=True)

    assert data["startDate"] == "2025-10-19"
    assert data["yearsWorked"] == 1
    assert data["anniversaryMessage"] == ANNIVERSARY_MESSAGE
    assert data["workHistory"][0]["jobTitle"] == "Trainee"
