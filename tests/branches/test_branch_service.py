import pytest

from src.hr_attendance.hr_attendance.core.enums import Role
from src.hr_attendance.hr_attendance.core.exceptions import AuthorizationError, NotFoundError, ValidationError


def test_admin_creates_and_updates_branch(container):
    service = container.branch_service
    branch_id = service.create(current_role=Role.ADMIN, name="Jeddah", latitude="21.5433", longitude=39.1728, radius=200)

    updated = service.update(current_role=Role.ADMIN, branch_id=branch_id, radius=350)

    assert updated.name == "Jeddah"
    assert updated.radius == 350
    assert service.get(branch_id).latitude == pytest.approx(21.5433)


def test_update_keeps_validation(container):
    with pytest.raises(ValidationError):
        container.branch_service.update(current_role=Role.ADMIN, branch_id=1, radius=-5)


def test_user_cannot_create_branch(container):
    with pytest.raises(AuthorizationError):
        container.branch_service.create(current_role=Role.USER, name="X", latitude=1, longitude=1, radius=10)


def test_delete_missing_branch(container):
    with pytest.raises(NotFoundError):
        container.branch_service.delete(current_role=Role.ADMIN, branch_id=77)
