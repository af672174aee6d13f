from datetime import date, datetime

from src.hr_attendance.hr_attendance.attendance.model import AttendanceReportRow
from src.hr_attendance.hr_attendance.core.enums import AttendanceStatus
from src.hr_attendance.hr_attendance.payroll.calculator.standard_calculator import StandardPayrollCalculator


def _row(check_in, check_out, *, break_minutes=60, late=0, overtime=0) -> AttendanceReportRow:
    return AttendanceReportRow(
        employee_id=1,
        employee_name="A",
        email="a@hr.local",
        branch_name="HQ",
        shift_name="Morning",
        break_minutes=break_minutes,
        work_date=date(2025, 3, 3),
        check_in_time=check_in,
        check_out_time=check_out,
        status=AttendanceStatus.ON_TIME,
        late_minutes=late,
        overtime_minutes=overtime,
    )


def test_worked_minutes_subtracts_break():
    row = _row(datetime(2025, 3, 3, 8, 30), datetime(2025, 3, 3, 17, 30))

    assert StandardPayrollCalculator().worked_minutes(row) == 8 * 60


def test_worked_minutes_across_midnight():
    row = _row(datetime(2025, 3, 3, 22, 0), datetime(2025, 3, 4, 6, 0), break_minutes=30)

    assert StandardPayrollCalculator().worked_minutes(row) == 450


def test_open_record_counts_nothing_but_lateness():
    row = _row(datetime(2025, 3, 3, 8, 30), None, late=30, overtime=15)
    calc = StandardPayrollCalculator()

    assert calc.worked_minutes(row) == 0
    assert calc.overtime_minutes(row) == 0
    assert calc.late_minutes(row) == 30


def test_worked_minutes_never_negative():
    row = _row(datetime(2025, 3, 3, 8, 0), datetime(2025, 3, 3, 8, 20), break_minutes=60)

    assert StandardPayrollCalculator().worked_minutes(row) == 0
