from datetime import date
from decimal import Decimal

import pytest

from src.hr_attendance.hr_attendance.core.enums import Role
from src.hr_attendance.hr_attendance.core.exceptions import AuthorizationError, ValidationError


def test_defaults(container):
    settings = container.settings_service.get()

    assert settings.number_of_vacations_in_year == 21
    assert settings.number_of_day_working_hours == 8
    assert settings.weekend_days == (4, 5)


def test_partial_update_keeps_other_values(container, repos):
    updated = container.settings_service.update(
        current_role=Role.ADMIN,
        rate_of_extra_and_late_hour="2.25",
        weekend_days=[5, 4, 4],
    )

    assert updated.rate_of_extra_and_late_hour == Decimal("2.25")
    assert updated.weekend_days == (4, 5)
    assert updated.number_of_vacations_in_year == 21
    assert repos.settings.get() == updated


@pytest.mark.parametrize(
    "field, value",
    [
        ("number_of_vacations_in_year", 366),
        ("number_of_vacations_in_year", -1),
        ("rate_of_extra_and_late_hour", "-0.5"),
        ("rate_of_extra_and_late_hour", "NaN"),
        ("rate_of_extra_and_late_hour", "Infinity"),
        ("rate_of_extra_and_late_hour", float("inf")),
        ("number_of_vacations_in_year", True),
        ("number_of_day_working_hours", 7.5),
        ("number_of_day_working_hours", 0),
        ("number_of_day_working_hours", 25),
        ("weekend_days", [7]),
        ("weekend_days", [0, 1, 2, 3, 4, 5, 6]),
    ],
)
def test_update_validation(container, field, value):
    with pytest.raises(ValidationError):
        container.settings_service.update(current_role=Role.ADMIN, **{field: value})


def test_update_requires_admin(container):
    with pytest.raises(AuthorizationError):
        container.settings_service.update(current_role=Role.USER, number_of_day_working_hours=7)


def test_rejected_rate_leaves_salaries_computable(container, repos):
    with pytest.raises(ValidationError):
        container.settings_service.update(current_role=Role.ADMIN, rate_of_extra_and_late_hour="Infinity")

    assert repos.settings.get().rate_of_extra_and_late_hour == Decimal("1.5")
    salaries = container.salary_service.list_salaries(current_role=Role.ADMIN, year=2025, month=3, today=date(2025, 3, 31))
    assert {s["employee_id"] for s in salaries} == {1, 2}
