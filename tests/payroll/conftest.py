from datetime import date, datetime

import pytest

from src.hr_attendance.hr_attendance.core.enums import AttendanceStatus, RequestStatus


@pytest.fixture
def march(repos):
    """Sara: on time on Sun 2, late and overtime on Mon 3, no record on Tue 4,
    approved vacation on Wed 5 and Thu 6."""

    repos.attendance.add(
        employee_id=2,
        shift_id=1,
        work_date=date(2025, 3, 2),
        check_in_time=datetime(2025, 3, 2, 8, 0),
        check_out_time=datetime(2025, 3, 2, 16, 0),
    )
    repos.attendance.add(
        employee_id=2,
        shift_id=1,
        work_date=date(2025, 3, 3),
        check_in_time=datetime(2025, 3, 3, 8, 30),
        check_out_time=datetime(2025, 3, 3, 17, 0),
        status=AttendanceStatus.LATE,
        late_minutes=30,
        overtime_minutes=60,
    )
    repos.requests.add(
        employee_id=2,
        start_date=date(2025, 3, 5),
        end_date=date(2025, 3, 6),
        status=RequestStatus.APPROVED,
    )
    return repos
