from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Optional


@dataclass
class EmployeeMonthSummary:
    """Attendance figures of one employee over one period."""

    employee_id: int
    employee_name: str
    branch_name: Optional[str] = None
    worked_minutes: int = 0
    late_minutes: int = 0
    overtime_minutes: int = 0
    attended_days: set[date] = field(default_factory=set)
    absent_days: list[date] = field(default_factory=list)
    vacation_days: list[date] = field(default_factory=list)


@dataclass(frozen=True)
class SalaryDetails:
    employee_id: int
    employee_name: str
    year: int
    month: int
    base_salary: Decimal
    working_days: int
    hourly_rate: Decimal
    overtime_hours: Decimal
    overtime_salary: Decimal
    late_hours: Decimal
    late_salary: Decimal
    absent_days: int
    absent_salary: Decimal
    sales_percentage: Decimal
    sales_salary: Decimal
    total_salary: Decimal

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "employee_name": self.employee_name,
            "year": self.year,
            "month": self.month,
            "base_salary": float(self.base_salary),
            "working_days": self.working_days,
            "hourly_rate": float(self.hourly_rate),
            "overtime_hours": float(self.overtime_hours),
            "overtime_salary": float(self.overtime_salary),
            "late_hours": float(self.late_hours),
            "late_salary": float(self.late_salary),
            "absent_days": self.absent_days,
            "absent_salary": float(self.absent_salary),
            "sales_percentage": float(self.sales_percentage),
            "sales_salary": float(self.sales_salary),
            "total_salary": float(self.total_salary),
        }
