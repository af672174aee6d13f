from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from werkzeug.security import check_password_hash

from ..branches.repository import BranchRepository
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, NotFoundError
from ..shifts.repository import ShiftRepository
from .model import Employee
from .repository import EmployeeRepository


@dataclass(frozen=True)
class SessionUser:
    """What we store into the Flask session after login."""

    employee_id: int
    name: str
    email: str
    role: Role
    branch_id: Optional[int]
    branch_name: Optional[str]
    shift_info: str


class AuthService:
    """Use case: authenticate an employee (login)."""

    def __init__(self, employees: EmployeeRepository, shifts: ShiftRepository, branches: BranchRepository):
        self._employees = employees
        self._shifts = shifts
        self._branches = branches

    def get_shift_info(self, employee_id: int) -> str:
        shifts = self._shifts.list_for_employee(employee_id)
        if not shifts:
            return "No shift assigned"
        return ", ".join(s.label() for s in shifts)

    def authenticate(self, email: str, password: str) -> SessionUser:
        employee = self._employees.get_by_email((email or "").strip().lower())
        if not employee or not employee.is_active:
            raise AuthenticationError("Invalid email or password")

        try:
            valid = check_password_hash(employee.password_hash, password or "")
        except ValueError:
            # placeholder hashes like 'CHANGE_ME' from raw seed data
            valid = False

        if not valid:
            raise AuthenticationError("Invalid email or password")

        branch = self._branches.get_by_id(employee.branch_id) if employee.branch_id else None
        return SessionUser(
            employee_id=employee.employee_id,
            name=employee.name,
            email=employee.email,
            role=employee.role,
            branch_id=employee.branch_id,
            branch_name=branch.name if branch else None,
            shift_info=self.get_shift_info(employee.employee_id),
        )


class EmployeeService:
    def __init__(self, employees: EmployeeRepository, shifts: ShiftRepository, branches: BranchRepository):
        self._employees = employees
        self._shifts = shifts
        self._branches = branches

    def get(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def get_profile(self, *, current_user_id: int, current_role: Role, employee_id: int) -> dict:
        if current_role != Role.ADMIN and int(current_user_id) != int(employee_id):
            raise AuthorizationError("Forbidden: You do not have permission to perform this action.")

        employee = self.get(employee_id)
        branch = self._branches.get_by_id(employee.branch_id) if employee.branch_id else None
        shifts = self._shifts.list_for_employee(employee.employee_id)
        return {
            "id": employee.employee_id,
            "name": employee.name,
            "email": employee.email,
            "role": employee.role.value,
            "base_salary": float(employee.base_salary),
            "hiring_date": employee.hiring_date.isoformat() if employee.hiring_date else None,
            "branch": branch.to_dict() if branch else None,
            "shifts": [s.to_dict() for s in shifts],
        }
