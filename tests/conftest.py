from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime, time
from decimal import Decimal
from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

from src.hr_attendance.hr_attendance.attendance.model import AttendanceRecord, AttendanceReportRow
from src.hr_attendance.hr_attendance.attendance.service import AttendancePolicy
from src.hr_attendance.hr_attendance.branches.model import Branch, LocationData
from src.hr_attendance.hr_attendance.container import Repositories, build_services
from src.hr_attendance.hr_attendance.core.enums import AttendanceStatus, RequestStatus, Role
from src.hr_attendance.hr_attendance.employees.model import Employee
from src.hr_attendance.hr_attendance.holidays.model import Holiday
from src.hr_attendance.hr_attendance.requests.model import LeaveRequest
from src.hr_attendance.hr_attendance.settings.model import GeneralSettings
from src.hr_attendance.hr_attendance.shifts.model import Shift

HQ_LAT = 24.7136
HQ_LON = 46.6753


class InMemoryEmployees:
    def __init__(self, employees=()):
        self.by_id: dict[int, Employee] = {e.employee_id: e for e in employees}

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self.by_id.get(int(employee_id))

    def get_by_email(self, email: str) -> Optional[Employee]:
        return next((e for e in self.by_id.values() if e.email == email), None)

    def list_active(self):
        return sorted((e for e in self.by_id.values() if e.is_active), key=lambda e: e.name)


class InMemoryBranches:
    def __init__(self, branches=()):
        self.by_id: dict[int, Branch] = {b.branch_id: b for b in branches}

    def list_all(self):
        return sorted(self.by_id.values(), key=lambda b: b.name)

    def get_by_id(self, branch_id: int) -> Optional[Branch]:
        return self.by_id.get(int(branch_id))

    def create(self, *, name, latitude, longitude, radius) -> int:
        branch_id = max(self.by_id, default=0) + 1
        self.by_id[branch_id] = Branch(branch_id, name, latitude, longitude, radius)
        return branch_id

    def update(self, branch: Branch) -> bool:
        self.by_id[branch.branch_id] = branch
        return True

    def delete(self, *, branch_id: int) -> bool:
        return self.by_id.pop(int(branch_id), None) is not None


class InMemoryShifts:
    def __init__(self, shifts=()):
        self.by_id: dict[int, Shift] = {s.shift_id: s for s in shifts}

    def list_all(self):
        return sorted(self.by_id.values(), key=lambda s: (s.employee_id or 0, s.start_time))

    def get_by_id(self, shift_id: int) -> Optional[Shift]:
        return self.by_id.get(int(shift_id))

    def list_for_employee(self, employee_id: int):
        return sorted((s for s in self.by_id.values() if s.employee_id == int(employee_id)), key=lambda s: s.start_time)

    def create(self, *, employee_id, shift_name, start_time, end_time, break_minutes=0) -> int:
        shift_id = max(self.by_id, default=0) + 1
        self.by_id[shift_id] = Shift(shift_id, employee_id, shift_name, start_time, end_time, break_minutes)
        return shift_id

    def delete(self, *, shift_id: int) -> bool:
        return self.by_id.pop(int(shift_id), None) is not None


class InMemoryAttendance:
    def __init__(self, employees: InMemoryEmployees, shifts: InMemoryShifts, branches: InMemoryBranches):
        self.records: dict[int, AttendanceRecord] = {}
        self._employees = employees
        self._shifts = shifts
        self._branches = branches

    def add(self, **fields) -> AttendanceRecord:
        attendance_id = max(self.records, default=0) + 1
        fields.setdefault("check_out_time", None)
        fields.setdefault("status", AttendanceStatus.ON_TIME)
        rec = AttendanceRecord(attendance_id=attendance_id, **fields)
        self.records[attendance_id] = rec
        return rec

    def get_recent_for_employee(self, employee_id: int, limit: int):
        items = [r for r in self.records.values() if r.employee_id == int(employee_id)]
        items.sort(key=lambda r: r.check_in_time, reverse=True)
        return items[:limit]

    def get_for_shift(self, *, employee_id: int, shift_id: int, work_date: date):
        return next(
            (
                r
                for r in self.records.values()
                if r.employee_id == employee_id and r.shift_id == shift_id and r.work_date == work_date
            ),
            None,
        )

    def list_for_date(self, work_date: date):
        return [r for r in self.records.values() if r.work_date == work_date]

    def count_for_shift(self, shift_id: int) -> int:
        return sum(1 for r in self.records.values() if r.shift_id == int(shift_id))

    def create_checkin(
        self,
        *,
        employee_id,
        shift_id,
        work_date,
        check_in_time,
        status,
        latitude,
        longitude,
        late_minutes=0,
        note=None,
    ) -> int:
        rec = self.add(
            employee_id=employee_id,
            shift_id=shift_id,
            work_date=work_date,
            check_in_time=check_in_time,
            status=status,
            check_in_latitude=latitude,
            check_in_longitude=longitude,
            late_minutes=late_minutes,
            note=note,
        )
        return rec.attendance_id

    def update_checkout(
        self,
        *,
        attendance_id,
        check_out_time,
        status,
        latitude,
        longitude,
        overtime_minutes=0,
        note=None,
    ) -> bool:
        rec = self.records.get(attendance_id)
        if not rec or rec.check_out_time is not None:
            return False
        self.records[attendance_id] = replace(
            rec,
            check_out_time=check_out_time,
            status=status,
            check_out_latitude=latitude,
            check_out_longitude=longitude,
            overtime_minutes=overtime_minutes,
            note=note,
        )
        return True

    def get_report_rows(self, *, start_date: date, end_date: date, employee_id=None):
        rows = []
        for r in sorted(self.records.values(), key=lambda r: (r.work_date, r.check_in_time)):
            if not start_date <= r.work_date <= end_date:
                continue
            if employee_id and r.employee_id != int(employee_id):
                continue
            e = self._employees.get_by_id(r.employee_id)
            s = self._shifts.get_by_id(r.shift_id)
            b = self._branches.get_by_id(e.branch_id) if e.branch_id else None
            rows.append(
                AttendanceReportRow(
                    employee_id=e.employee_id,
                    employee_name=e.name,
                    email=e.email,
                    branch_name=b.name if b else None,
                    shift_name=s.shift_name if s else None,
                    break_minutes=s.break_minutes if s else 0,
                    work_date=r.work_date,
                    check_in_time=r.check_in_time,
                    check_out_time=r.check_out_time,
                    status=r.status,
                    late_minutes=r.late_minutes,
                    overtime_minutes=r.overtime_minutes,
                    note=r.note,
                )
            )
        return rows


class InMemorySettings:
    def __init__(self, settings: Optional[GeneralSettings] = None):
        self.current = settings or GeneralSettings()

    def get(self) -> GeneralSettings:
        return self.current

    def save(self, settings: GeneralSettings) -> None:
        self.current = settings


class InMemoryHolidays:
    def __init__(self, holidays=()):
        self.by_id: dict[int, Holiday] = {h.holiday_id: h for h in holidays}

    def list_range(self, *, start: date, end: date):
        return sorted((h for h in self.by_id.values() if start <= h.day <= end), key=lambda h: h.day)

    def get_by_day(self, day: date):
        return next((h for h in self.by_id.values() if h.day == day), None)

    def create(self, *, name: str, day: date) -> int:
        holiday_id = max(self.by_id, default=0) + 1
        self.by_id[holiday_id] = Holiday(holiday_id, name, day)
        return holiday_id

    def delete(self, *, holiday_id: int) -> bool:
        return self.by_id.pop(int(holiday_id), None) is not None


class InMemoryRequests:
    def __init__(self):
        self.by_id: dict[int, LeaveRequest] = {}

    def add(self, *, employee_id, start_date, end_date, status=RequestStatus.PENDING, reason="Family") -> int:
        request_id = max(self.by_id, default=0) + 1
        self.by_id[request_id] = LeaveRequest(
            request_id=request_id,
            employee_id=employee_id,
            start_date=start_date,
            end_date=end_date,
            reason=reason,
            status=status,
            created_at=datetime(2025, 1, 1, 9, 0),
        )
        return request_id

    def create_leave(self, *, employee_id, start_date, end_date, reason) -> int:
        return self.add(employee_id=employee_id, start_date=start_date, end_date=end_date, reason=reason)

    def get_leave(self, *, request_id: int):
        return self.by_id.get(int(request_id))

    def list_leave_requests(self, *, status=None, employee_id=None, limit=200):
        out = []
        for r in self.by_id.values():
            if status is not None and r.status != status:
                continue
            if employee_id is not None and r.employee_id != employee_id:
                continue
            out.append(
                {
                    "request_id": r.request_id,
                    "employee_id": r.employee_id,
                    "start_date": r.start_date.isoformat(),
                    "end_date": r.end_date.isoformat(),
                    "status": r.status.value,
                }
            )
        return out[:limit]

    def list_approved_between(self, *, start: date, end: date, employee_id=None):
        return [
            r
            for r in self.by_id.values()
            if r.status == RequestStatus.APPROVED
            and r.start_date <= end
            and r.end_date >= start
            and (employee_id is None or r.employee_id == int(employee_id))
        ]

    def decide_leave(self, *, request_id, status, decided_by, admin_note=None) -> bool:
        r = self.by_id.get(int(request_id))
        if not r or r.status != RequestStatus.PENDING:
            return False
        self.by_id[r.request_id] = replace(r, status=status, decided_by=decided_by, admin_note=admin_note)
        return True


class InMemorySalaryAdjustments:
    def __init__(self):
        self.values: dict[tuple[int, int, int], Decimal] = {}

    def get_sales_percentage(self, *, employee_id, year, month) -> Decimal:
        return self.values.get((int(employee_id), int(year), int(month)), Decimal("0"))

    def list_sales_percentages(self, *, year, month):
        return {e: v for (e, y, m), v in self.values.items() if y == int(year) and m == int(month)}

    def set_sales_percentage(self, *, employee_id, year, month, percentage) -> None:
        self.values[(int(employee_id), int(year), int(month))] = percentage


@pytest.fixture
def fixed_now() -> datetime:
    # Monday
    return datetime(2025, 3, 3, 8, 3, 0)


@pytest.fixture
def hq() -> Branch:
    return Branch(branch_id=1, name="Head Office", latitude=HQ_LAT, longitude=HQ_LON, radius=150)


@pytest.fixture
def admin() -> Employee:
    return Employee(
        employee_id=1,
        name="Admin",
        email="admin@hr.local",
        password_hash=generate_password_hash("admin123"),
        role=Role.ADMIN,
        branch_id=1,
        base_salary=Decimal("12000"),
    )


@pytest.fixture
def employee() -> Employee:
    return Employee(
        employee_id=2,
        name="Sara",
        email="employee@hr.local",
        password_hash=generate_password_hash("employee123"),
        role=Role.USER,
        branch_id=1,
        base_salary=Decimal("6000"),
        hiring_date=date(2024, 3, 1),
    )


@pytest.fixture
def shifts() -> list[Shift]:
    return [
        Shift(1, 2, "Morning", time(8, 0), time(16, 0), 30),
        Shift(2, 2, "Night", time(22, 0), time(6, 0), 30),
    ]


@pytest.fixture
def repos(hq, admin, employee, shifts) -> Repositories:
    employees = InMemoryEmployees([admin, employee])
    branches = InMemoryBranches([hq])
    shift_repo = InMemoryShifts(shifts)
    return Repositories(
        employees=employees,
        branches=branches,
        shifts=shift_repo,
        attendance=InMemoryAttendance(employees, shift_repo, branches),
        settings=InMemorySettings(),
        holidays=InMemoryHolidays(),
        requests=InMemoryRequests(),
        salary_adjustments=InMemorySalaryAdjustments(),
    )


@pytest.fixture
def container(repos):
    return build_services(repos, policy=AttendancePolicy(timezone=None))


@pytest.fixture
def at_hq() -> LocationData:
    return LocationData(latitude=HQ_LAT, longitude=HQ_LON, accuracy=10)
