from datetime import date

import pytest

from src.hr_attendance.hr_attendance.core.enums import Role
from src.hr_attendance.hr_attendance.core.exceptions import AuthorizationError, ValidationError

TODAY = date(2025, 3, 4)


def _by_employee(items):
    return {i["employee_id"]: i for i in items}


def test_attendance_report_summarizes_month(container, march):
    report = container.payroll_report_service.attendance_report(current_role=Role.ADMIN, year=2025, month=3, today=TODAY)

    assert report["total_count"] == 2
    assert [i["employee_name"] for i in report["items"]] == ["Admin", "Sara"]

    sara = _by_employee(report["items"])[2]
    assert sara["working_hours"] == 15.5
    assert sara["late_hours"] == 0.5
    assert sara["overtime_hours"] == 1.0
    assert sara["attended_days"] == 2
    assert sara["absent_days"] == 1
    assert sara["vacation_days"] == 2
    assert sara["branch_name"] == "Head Office"


def test_attendance_report_pagination(container, march):
    report = container.payroll_report_service.attendance_report(
        current_role=Role.ADMIN, year=2025, month=3, page_number=2, page_size=1, today=TODAY
    )

    assert report["total_pages"] == 2
    assert [i["employee_name"] for i in report["items"]] == ["Sara"]


def test_absence_report_lists_days_up_to_today(container, march):
    report = _by_employee(
        container.payroll_report_service.absence_report(current_role=Role.ADMIN, year=2025, month=3, today=TODAY)
    )

    assert report[2]["days"] == [{"date": "2025-03-04", "hours": 8}]
    assert report[2]["total_hours"] == 8
    # admin has no shifts and no records: Sun 2, Mon 3, Tue 4
    assert report[1]["total_days"] == 3


def test_holiday_is_never_an_absence(container, march):
    march.holidays.create(name="Holiday", day=date(2025, 3, 4))

    report = _by_employee(
        container.payroll_report_service.absence_report(current_role=Role.ADMIN, year=2025, month=3, today=TODAY)
    )

    assert 2 not in report


def test_vacation_report(container, march):
    report = container.payroll_report_service.vacation_report(current_role=Role.ADMIN, year=2025, month=3)

    assert report == [{"employee_id": 2, "employee_name": "Sara", "days": ["2025-03-05", "2025-03-06"], "total_days": 2}]


def test_reports_are_admin_only(container):
    with pytest.raises(AuthorizationError):
        container.payroll_report_service.vacation_report(current_role=Role.USER, year=2025, month=3)


def test_invalid_month(container):
    with pytest.raises(ValidationError):
        container.payroll_report_service.vacation_report(current_role=Role.ADMIN, year=2025, month=13)


def test_employee_report_by_range(container, march):
    report = container.payroll_report_service.employee_attendance_report(
        current_user_id=2,
        current_role=Role.USER,
        employee_id=2,
        report_type=2,
        date_from="2025-03-02",
        date_to="2025-03-03",
    )

    assert [r["date"] for r in report["rows"]] == ["2025-03-02", "2025-03-03"]
    late_day = report["rows"][1]
    assert late_day["time_of_attend"] == "08:30"
    assert late_day["time_of_leave"] == "17:00"
    assert late_day["late_hours"] == 0.5
    assert late_day["overtime_hours"] == 1.0
    assert late_day["branch"] == "Head Office"


def test_employee_report_by_day_and_privacy(container, march):
    report = container.payroll_report_service.employee_attendance_report(
        current_user_id=1, current_role=Role.ADMIN, employee_id=2, report_type=1, day="2025-03-03"
    )
    assert len(report["rows"]) == 1

    with pytest.raises(AuthorizationError):
        container.payroll_report_service.employee_attendance_report(
            current_user_id=1, current_role=Role.USER, employee_id=2, report_type=3, year=2025, month=3
        )


def test_employee_report_rejects_unknown_type(container):
    with pytest.raises(ValidationError):
        container.payroll_report_service.employee_attendance_report(
            current_user_id=2, current_role=Role.USER, employee_id=2, report_type=9
        )
