from __future__ import annotations

from .base import PayrollCalculator
from ...attendance.model import AttendanceReportRow


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: (out - in) - break_minutes, not below 0.

    Late and overtime minutes are the values stamped at check-in/check-out.
    """

    def worked_minutes(self, row: AttendanceReportRow) -> int:
        if not row.check_out_time:
            return 0
        minutes = int((row.check_out_time - row.check_in_time).total_seconds() // 60)
        minutes -= int(row.break_minutes or 0)
        return max(minutes, 0)

    def late_minutes(self, row: AttendanceReportRow) -> int:
        return max(int(row.late_minutes or 0), 0)

    def overtime_minutes(self, row: AttendanceReportRow) -> int:
        if not row.check_out_time:
            return 0
        return max(int(row.overtime_minutes or 0), 0)
