from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..attendance.model import AttendanceReportRow
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import minutes_to_hours, now_local, parse_iso_date
from ..common.pagination import paginate
from ..common.validators import require_int, require_range
from ..core.constants import DEFAULT_PAGE_SIZE, DEFAULT_TIMEZONE
from ..core.enums import ReportType, Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..requests.model import LeaveRequest
from ..requests.repository import RequestRepository
from ..settings.repository import SettingsRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .calendar import WorkCalendar, month_bounds
from .model import EmployeeMonthSummary


def _require_admin(current_role: Role) -> None:
    if current_role != Role.ADMIN:
        raise AuthorizationError("Forbidden: You do not have permission to perform this action.")


def validate_period(year, month) -> tuple[int, int]:
    year = require_range(require_int(year, "Year"), "Year", minimum=2000, maximum=2100)
    month = require_range(require_int(month, "Month"), "Month", minimum=1, maximum=12)
    return year, month


class PayrollReportService:
    """Monthly attendance, absence and vacation reports.

    Absence is only counted up to the reference day (``today``): a working
    day in the future is never absent.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        requests: RequestRepository,
        settings: SettingsRepository,
        calendar: WorkCalendar,
        *,
        calculator: Optional[PayrollCalculator] = None,
        timezone: Optional[str] = DEFAULT_TIMEZONE,
    ):
        self._attendance = attendance
        self._employees = employees
        self._requests = requests
        self._settings = settings
        self._calendar = calendar
        self._calculator = calculator or StandardPayrollCalculator()
        self._timezone = timezone

    def _today(self, today: Optional[date]) -> date:
        return today or now_local(self._timezone).date()

    def summarize(
        self,
        employee: Employee,
        rows: Sequence[AttendanceReportRow],
        leaves: Sequence[LeaveRequest],
        working_days: Sequence[date],
        today: date,
    ) -> EmployeeMonthSummary:
        summary = EmployeeMonthSummary(employee_id=employee.employee_id, employee_name=employee.name)
        for r in rows:
            summary.worked_minutes += self._calculator.worked_minutes(r)
            summary.late_minutes += self._calculator.late_minutes(r)
            summary.overtime_minutes += self._calculator.overtime_minutes(r)
            summary.attended_days.add(r.work_date)
            summary.branch_name = summary.branch_name or r.branch_name

        for day in working_days:
            if any(leave.covers(day) for leave in leaves):
                summary.vacation_days.append(day)
                continue
            if day > today or day in summary.attended_days:
                continue
            if employee.hiring_date and day < employee.hiring_date:
                continue
            summary.absent_days.append(day)
        return summary

    def monthly_summaries(self, year: int, month: int, *, today: Optional[date] = None) -> list[EmployeeMonthSummary]:
        start, end = month_bounds(year, month)
        return self.period_summaries(start, end, today=today)

    def period_summaries(
        self,
        start: date,
        end: date,
        *,
        today: Optional[date] = None,
        employee_id: Optional[int] = None,
    ) -> list[EmployeeMonthSummary]:
        today = self._today(today)
        working_days = self._calendar.working_days(start, end)

        rows_by_employee: dict[int, list[AttendanceReportRow]] = {}
        for r in self._attendance.get_report_rows(start_date=start, end_date=end, employee_id=employee_id):
            rows_by_employee.setdefault(r.employee_id, []).append(r)

        leaves_by_employee: dict[int, list[LeaveRequest]] = {}
        for leave in self._requests.list_approved_between(start=start, end=end, employee_id=employee_id):
            leaves_by_employee.setdefault(leave.employee_id, []).append(leave)

        employees = self._employees.list_active()
        if employee_id is not None:
            employees = [e for e in employees if e.employee_id == int(employee_id)]

        return [
            self.summarize(
                e,
                rows_by_employee.get(e.employee_id, []),
                leaves_by_employee.get(e.employee_id, []),
                working_days,
                today,
            )
            for e in employees
        ]

    def attendance_report(
        self,
        *,
        current_role: Role,
        year,
        month,
        page_number=1,
        page_size=DEFAULT_PAGE_SIZE,
        today: Optional[date] = None,
    ) -> dict:
        _require_admin(current_role)
        year, month = validate_period(year, month)

        items = [
            {
                "employee_id": s.employee_id,
                "employee_name": s.employee_name,
                "branch_name": s.branch_name or "-",
                "working_hours": minutes_to_hours(s.worked_minutes),
                "late_hours": minutes_to_hours(s.late_minutes),
                "overtime_hours": minutes_to_hours(s.overtime_minutes),
                "attended_days": len(s.attended_days),
                "absent_days": len(s.absent_days),
                "vacation_days": len(s.vacation_days),
            }
            for s in self.monthly_summaries(year, month, today=today)
        ]
        items.sort(key=lambda x: x["employee_name"])
        return paginate(items, page_number, page_size)

    def absence_report(self, *, current_role: Role, year, month, today: Optional[date] = None) -> list[dict]:
        _require_admin(current_role)
        year, month = validate_period(year, month)
        hours = self._settings.get().number_of_day_working_hours

        out = []
        for s in self.monthly_summaries(year, month, today=today):
            if not s.absent_days:
                continue
            out.append(
                {
                    "employee_id": s.employee_id,
                    "employee_name": s.employee_name,
                    "days": [{"date": d.isoformat(), "hours": hours} for d in s.absent_days],
                    "total_days": len(s.absent_days),
                    "total_hours": len(s.absent_days) * hours,
                }
            )
        return out

    def vacation_report(self, *, current_role: Role, year, month) -> list[dict]:
        _require_admin(current_role)
        year, month = validate_period(year, month)

        out = []
        for s in self.monthly_summaries(year, month):
            if not s.vacation_days:
                continue
            out.append(
                {
                    "employee_id": s.employee_id,
                    "employee_name": s.employee_name,
                    "days": [d.isoformat() for d in s.vacation_days],
                    "total_days": len(s.vacation_days),
                }
            )
        return out

    @staticmethod
    def resolve_range(
        report_type,
        *,
        day: Optional[str] = None,
        date_from: Optional[str] = None,
        date_to: Optional[str] = None,
        year=None,
        month=None,
    ) -> tuple[date, date]:
        try:
            report_type = ReportType(require_int(report_type, "Report type"))
        except ValueError:
            raise ValidationError("Report type must be 1 (day), 2 (range) or 3 (month)")

        if report_type == ReportType.DAY:
            d = parse_iso_date(day)
            return d, d
        if report_type == ReportType.RANGE:
            start, end = parse_iso_date(date_from), parse_iso_date(date_to)
            if end < start:
                raise ValidationError("End date must be on or after start date")
            return start, end
        return month_bounds(*validate_period(year, month))

    def employee_attendance_report(
        self,
        *,
        current_user_id: int,
        current_role: Role,
        employee_id: int,
        report_type,
        day: Optional[str] = None,
        date_from: Optional[str] = None,
        date_to: Optional[str] = None,
        year=None,
        month=None,
    ) -> dict:
        if current_role != Role.ADMIN and int(current_user_id) != int(employee_id):
            raise AuthorizationError("Forbidden: You do not have permission to perform this action.")

        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise NotFoundError("Employee not found")

        start, end = self.resolve_range(
            report_type, day=day, date_from=date_from, date_to=date_to, year=year, month=month
        )
        rows = self._attendance.get_report_rows(start_date=start, end_date=end, employee_id=employee.employee_id)

        return {
            "employee_id": employee.employee_id,
            "employee_name": employee.name,
            "from": start.isoformat(),
            "to": end.isoformat(),
            "rows": [
                {
                    "date": r.work_date.isoformat(),
                    "time_of_attend": r.check_in_time.strftime("%H:%M"),
                    "time_of_leave": r.check_out_time.strftime("%H:%M") if r.check_out_time else None,
                    "branch": r.branch_name or "-",
                    "shift": r.shift_name or "-",
                    "status": r.status.value,
                    "worked_hours": minutes_to_hours(self._calculator.worked_minutes(r)),
                    "overtime_hours": minutes_to_hours(self._calculator.overtime_minutes(r)),
                    "late_hours": minutes_to_hours(self._calculator.late_minutes(r)),
                }
                for r in rows
            ],
        }
