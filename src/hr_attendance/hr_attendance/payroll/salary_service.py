from __future__ import annotations

import logging
from datetime import date
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Optional

from ..core.enums import Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..settings.repository import SettingsRepository
from .calendar import WorkCalendar, month_bounds
from .model import EmployeeMonthSummary, SalaryDetails
from .repository import SalaryAdjustmentRepository
from .service import PayrollReportService, validate_period

logger = logging.getLogger(__name__)

_CENT = Decimal("0.01")
_ZERO = Decimal("0")


def money(value: Decimal) -> Decimal:
    return value.quantize(_CENT, rounding=ROUND_HALF_UP)


def _hours(minutes: int) -> Decimal:
    return Decimal(int(minutes)) / Decimal(60)


class SalaryService:
    """Monthly salary built from base salary and the attendance summary.

    hourly = base / (working days * day hours); overtime and late hours are
    weighted by the configured rate; an absent day costs a full day.
    """

    def __init__(
        self,
        employees: EmployeeRepository,
        reports: PayrollReportService,
        settings: SettingsRepository,
        calendar: WorkCalendar,
        adjustments: SalaryAdjustmentRepository,
    ):
        self._employees = employees
        self._reports = reports
        self._settings = settings
        self._calendar = calendar
        self._adjustments = adjustments

    def compute(
        self,
        employee: Employee,
        summary: EmployeeMonthSummary,
        *,
        year: int,
        month: int,
        sales_percentage: Decimal,
    ) -> SalaryDetails:
        settings = self._settings.get()
        start, end = month_bounds(year, month)
        working_days = self._calendar.count_working_days(start, end)
        day_hours = Decimal(settings.number_of_day_working_hours)
        rate = Decimal(settings.rate_of_extra_and_late_hour)
        base = Decimal(employee.base_salary)

        hourly = base / (working_days * day_hours) if working_days else _ZERO
        overtime_hours = _hours(summary.overtime_minutes)
        late_hours = _hours(summary.late_minutes)
        absent_days = len(summary.absent_days)

        overtime_salary = money(overtime_hours * hourly * rate)
        late_salary = money(late_hours * hourly * rate)
        absent_salary = money(absent_days * day_hours * hourly)
        sales_salary = money(base * sales_percentage / Decimal(100))

        total = base + overtime_salary + sales_salary - late_salary - absent_salary
        return SalaryDetails(
            employee_id=employee.employee_id,
            employee_name=employee.name,
            year=year,
            month=month,
            base_salary=money(base),
            working_days=working_days,
            hourly_rate=money(hourly),
            overtime_hours=money(overtime_hours),
            overtime_salary=overtime_salary,
            late_hours=money(late_hours),
            late_salary=late_salary,
            absent_days=absent_days,
            absent_salary=absent_salary,
            sales_percentage=sales_percentage,
            sales_salary=sales_salary,
            total_salary=money(max(total, _ZERO)),
        )

    def details(
        self,
        *,
        current_user_id: int,
        current_role: Role,
        employee_id: int,
        year,
        month,
        today: Optional[date] = None,
    ) -> SalaryDetails:
        if current_role != Role.ADMIN and int(current_user_id) != int(employee_id):
            raise AuthorizationError("Forbidden: You do not have permission to perform this action.")
        year, month = validate_period(year, month)

        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise NotFoundError("Employee not found")

        start, end = month_bounds(year, month)
        summaries = self._reports.period_summaries(start, end, today=today, employee_id=employee.employee_id)
        summary = summaries[0] if summaries else EmployeeMonthSummary(employee.employee_id, employee.name)
        pct = self._adjustments.get_sales_percentage(employee_id=employee.employee_id, year=year, month=month)
        return self.compute(employee, summary, year=year, month=month, sales_percentage=pct)

    def list_salaries(self, *, current_role: Role, year, month, today: Optional[date] = None) -> list[dict]:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Forbidden: You do not have permission to perform this action.")
        year, month = validate_period(year, month)

        employees = {e.employee_id: e for e in self._employees.list_active()}
        percentages = self._adjustments.list_sales_percentages(year=year, month=month)
        out = []
        for summary in self._reports.monthly_summaries(year, month, today=today):
            employee = employees.get(summary.employee_id)
            if not employee:
                continue
            d = self.compute(
                employee,
                summary,
                year=year,
                month=month,
                sales_percentage=percentages.get(employee.employee_id, _ZERO),
            )
            out.append(
                {
                    "employee_id": d.employee_id,
                    "employee_name": d.employee_name,
                    "base_salary": float(d.base_salary),
                    "total_salary": float(d.total_salary),
                }
            )
        out.sort(key=lambda x: x["employee_name"])
        return out

    def update_sales_percentage(self, *, current_role: Role, employee_id: int, year, month, percentage) -> Decimal:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Forbidden: You do not have permission to perform this action.")
        year, month = validate_period(year, month)

        if not self._employees.get_by_id(int(employee_id)):
            raise NotFoundError("Employee not found")

        try:
            pct = Decimal(str(percentage))
        except InvalidOperation:
            raise ValidationError("Sales percentage must be a number")
        if not pct.is_finite() or pct < 0 or pct > 100:
            raise ValidationError("Sales percentage must be between 0 and 100")

        self._adjustments.set_sales_percentage(employee_id=int(employee_id), year=year, month=month, percentage=pct)
        logger.info("Sales percentage for employee %s set to %s%% (%04d-%02d)", employee_id, pct, year, month)
        return pct
