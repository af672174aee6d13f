from dataclasses import replace
from datetime import date

import pytest

from src.hr_attendance.hr_attendance.core.enums import RequestStatus, Role
from src.hr_attendance.hr_attendance.core.exceptions import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)


def test_create_leave_counts_working_days_only(container, repos):
    request_id = container.request_service.create_leave(
        current_role=Role.USER,
        employee_id=2,
        start_date=date(2025, 3, 6),
        end_date=date(2025, 3, 9),
        reason="Family trip",
    )

    assert repos.requests.get_leave(request_id=request_id).status == RequestStatus.PENDING
    assert [r["request_id"] for r in container.request_service.list_my_requests(employee_id=2)] == [request_id]
    assert container.request_service.list_pending()[0]["employee_id"] == 2


def test_create_leave_rejects_reversed_dates(container):
    with pytest.raises(ValidationError):
        container.request_service.create_leave(
            current_role=Role.USER, employee_id=2, start_date=date(2025, 3, 9), end_date=date(2025, 3, 6), reason="x"
        )


def test_create_leave_requires_reason(container):
    with pytest.raises(ValidationError):
        container.request_service.create_leave(
            current_role=Role.USER, employee_id=2, start_date=date(2025, 3, 9), end_date=date(2025, 3, 9), reason="  "
        )


def test_weekend_only_leave_is_rejected(container):
    with pytest.raises(ValidationError):
        container.request_service.create_leave(
            current_role=Role.USER, employee_id=2, start_date=date(2025, 3, 7), end_date=date(2025, 3, 8), reason="x"
        )


def test_vacation_balance(container, repos):
    repos.settings.save(replace(repos.settings.get(), number_of_vacations_in_year=5))
    repos.requests.add(
        employee_id=2, start_date=date(2025, 1, 5), end_date=date(2025, 1, 7), status=RequestStatus.APPROVED
    )
    assert container.request_service.approved_days_in_year(2, 2025) == 3

    # Sun 9 .. Mon 10 -> 2 more days: 3 + 2 = 5 fits
    container.request_service.create_leave(
        current_role=Role.USER, employee_id=2, start_date=date(2025, 3, 9), end_date=date(2025, 3, 10), reason="x"
    )

    with pytest.raises(ValidationError) as exc:
        container.request_service.create_leave(
            current_role=Role.USER, employee_id=2, start_date=date(2025, 3, 9), end_date=date(2025, 3, 11), reason="x"
        )
    assert "allowed 5" in str(exc.value)


def test_approve_and_reject(container, repos):
    first = repos.requests.add(employee_id=2, start_date=date(2025, 3, 9), end_date=date(2025, 3, 9))
    second = repos.requests.add(employee_id=2, start_date=date(2025, 3, 10), end_date=date(2025, 3, 10))

    container.request_service.approve_leave(current_role=Role.ADMIN, admin_id=1, request_id=first, admin_note="ok")
    container.request_service.reject_leave(current_role=Role.ADMIN, admin_id=1, request_id=second)

    assert repos.requests.get_leave(request_id=first).status == RequestStatus.APPROVED
    assert repos.requests.get_leave(request_id=first).admin_note == "ok"
    assert repos.requests.get_leave(request_id=second).status == RequestStatus.REJECTED

    with pytest.raises(ConflictError):
        container.request_service.approve_leave(current_role=Role.ADMIN, admin_id=1, request_id=second)


def test_only_admin_decides(container, repos):
    request_id = repos.requests.add(employee_id=2, start_date=date(2025, 3, 9), end_date=date(2025, 3, 9))

    with pytest.raises(AuthorizationError):
        container.request_service.approve_leave(current_role=Role.USER, admin_id=2, request_id=request_id)
    with pytest.raises(NotFoundError):
        container.request_service.reject_leave(current_role=Role.ADMIN, admin_id=1, request_id=999)
