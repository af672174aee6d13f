from datetime import date

from src.hr_attendance.hr_attendance.payroll.calendar import WorkCalendar, month_bounds


def test_month_bounds_handles_february():
    assert month_bounds(2024, 2) == (date(2024, 2, 1), date(2024, 2, 29))
    assert month_bounds(2025, 2) == (date(2025, 2, 1), date(2025, 2, 28))


def test_weekend_and_holidays_are_not_working_days(repos):
    calendar = WorkCalendar(repos.settings, repos.holidays)

    # Friday / Saturday weekend by default
    assert not calendar.is_working_day(date(2025, 3, 7))
    assert not calendar.is_working_day(date(2025, 3, 8))
    assert calendar.is_working_day(date(2025, 3, 9))
    assert calendar.count_working_days(date(2025, 3, 1), date(2025, 3, 31)) == 22

    repos.holidays.create(name="Founding Day", day=date(2025, 3, 9))

    assert not calendar.is_working_day(date(2025, 3, 9))
    assert calendar.count_working_days(date(2025, 3, 1), date(2025, 3, 31)) == 21


def test_reversed_range_is_empty(repos):
    calendar = WorkCalendar(repos.settings, repos.holidays)

    assert calendar.working_days(date(2025, 3, 5), date(2025, 3, 1)) == []
