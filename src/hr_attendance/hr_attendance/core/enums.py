from __future__ import annotations

from enum import Enum, IntEnum


class Role(str, Enum):
    """User role used by the route guards."""

    ADMIN = "admin"
    USER = "user"


class AttendanceStatus(str, Enum):
    """Normalized attendance status stored in the database."""

    ON_TIME = "ON_TIME"
    LATE = "LATE"
    ABSENT = "ABSENT"
    UNKNOWN = "UNKNOWN"


class RequestStatus(str, Enum):
    """Approval workflow status for vacation requests."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class ReportType(IntEnum):
    """Period selector of the per-employee attendance report."""

    DAY = 1
    RANGE = 2
    MONTH = 3
