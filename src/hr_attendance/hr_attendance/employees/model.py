from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Note: Plain data object, no database access code here.
    """

    employee_id: int
    name: str
    email: str
    password_hash: str
    role: Role
    branch_id: Optional[int]
    base_salary: Decimal = Decimal("0")
    hiring_date: Optional[date] = None
    is_active: bool = True
