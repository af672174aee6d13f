from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.factory import AttendanceStrategyFactory
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendancePolicy, AttendanceService
from .branches.mysql_branch_repository import MySQLBranchRepository
from .branches.repository import BranchRepository
from .branches.service import BranchService
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import AuthService, EmployeeService
from .holidays.mysql_holiday_repository import MySQLHolidayRepository
from .holidays.repository import HolidayRepository
from .holidays.service import HolidayService
from .payroll.calendar import WorkCalendar
from .payroll.mysql_salary_repository import MySQLSalaryAdjustmentRepository
from .payroll.repository import SalaryAdjustmentRepository
from .payroll.salary_service import SalaryService
from .payroll.service import PayrollReportService
from .requests.mysql_request_repository import MySQLRequestRepository
from .requests.repository import RequestRepository
from .requests.service import RequestService
from .settings.mysql_settings_repository import MySQLSettingsRepository
from .settings.repository import SettingsRepository
from .settings.service import SettingsService
from .shifts.mysql_shift_repository import MySQLShiftRepository
from .shifts.repository import ShiftRepository
from .shifts.service import ShiftService


@dataclass(frozen=True)
class Repositories:
    employees: EmployeeRepository
    branches: BranchRepository
    shifts: ShiftRepository
    attendance: AttendanceRepository
    settings: SettingsRepository
    holidays: HolidayRepository
    requests: RequestRepository
    salary_adjustments: SalaryAdjustmentRepository


@dataclass(frozen=True)
class Container:
    repos: Repositories

    auth_service: AuthService
    employee_service: EmployeeService
    branch_service: BranchService
    shift_service: ShiftService
    attendance_service: AttendanceService
    settings_service: SettingsService
    holiday_service: HolidayService
    request_service: RequestService
    payroll_report_service: PayrollReportService
    salary_service: SalaryService

    conn: Optional[DatabaseConnection] = None


def build_services(
    repos: Repositories,
    *,
    policy: Optional[AttendancePolicy] = None,
    overtime_threshold_minutes: int = 30,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Wire services on top of any set of repositories (MySQL or in-memory)."""

    policy = policy or AttendancePolicy()
    calendar = WorkCalendar(repos.settings, repos.holidays)

    attendance_service = AttendanceService(
        repos.attendance,
        repos.employees,
        repos.shifts,
        repos.branches,
        strategy_factory=AttendanceStrategyFactory(overtime_threshold_minutes=overtime_threshold_minutes),
        policy=policy,
    )
    payroll_report_service = PayrollReportService(
        repos.attendance,
        repos.employees,
        repos.requests,
        repos.settings,
        calendar,
        timezone=policy.timezone,
    )

    return Container(
        repos=repos,
        auth_service=AuthService(repos.employees, repos.shifts, repos.branches),
        employee_service=EmployeeService(repos.employees, repos.shifts, repos.branches),
        branch_service=BranchService(repos.branches),
        shift_service=ShiftService(repos.shifts, repos.employees, repos.attendance),
        attendance_service=attendance_service,
        settings_service=SettingsService(repos.settings),
        holiday_service=HolidayService(repos.holidays),
        request_service=RequestService(repos.requests, repos.settings, calendar),
        payroll_report_service=payroll_report_service,
        salary_service=SalaryService(
            repos.employees,
            payroll_report_service,
            repos.settings,
            calendar,
            repos.salary_adjustments,
        ),
        conn=conn,
    )


def build_container(
    *,
    db_config: dict,
    policy: Optional[AttendancePolicy] = None,
    overtime_threshold_minutes: int = 30,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    repos = Repositories(
        employees=MySQLEmployeeRepository(conn),
        branches=MySQLBranchRepository(conn),
        shifts=MySQLShiftRepository(conn),
        attendance=MySQLAttendanceRepository(conn),
        settings=MySQLSettingsRepository(conn),
        holidays=MySQLHolidayRepository(conn),
        requests=MySQLRequestRepository(conn),
        salary_adjustments=MySQLSalaryAdjustmentRepository(conn),
    )
    return build_services(
        repos,
        policy=policy,
        overtime_threshold_minutes=overtime_threshold_minutes,
        conn=conn,
    )
