from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional, Sequence

from ..common.validators import require_float
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, NotFoundError
from .geo import validate_branch
from .model import Branch
from .repository import BranchRepository

logger = logging.getLogger(__name__)


class BranchService:
    def __init__(self, branches: BranchRepository):
        self._branches = branches

    def list_all(self) -> Sequence[Branch]:
        return list(self._branches.list_all())

    def get(self, branch_id: int) -> Branch:
        branch = self._branches.get_by_id(int(branch_id))
        if not branch:
            raise NotFoundError("Branch not found")
        return branch

    def create(self, *, current_role: Role, name: str, latitude, longitude, radius) -> int:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Forbidden: You do not have permission to perform this action.")

        branch = Branch(
            branch_id=0,
            name=(name or "").strip(),
            latitude=require_float(latitude, "Latitude"),
            longitude=require_float(longitude, "Longitude"),
            radius=require_float(radius, "Radius"),
        )
        validate_branch(branch)
        branch_id = self._branches.create(
            name=branch.name,
            latitude=branch.latitude,
            longitude=branch.longitude,
            radius=branch.radius,
        )
        logger.info("Branch %s (%s) created with radius %.0fm", branch_id, branch.name, branch.radius)
        return branch_id

    def update(
        self,
        *,
        current_role: Role,
        branch_id: int,
        name: Optional[str] = None,
        latitude=None,
        longitude=None,
        radius=None,
    ) -> Branch:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Forbidden: You do not have permission to perform this action.")

        branch = self.get(branch_id)
        changes = {}
        if name is not None:
            changes["name"] = name.strip()
        if latitude is not None:
            changes["latitude"] = require_float(latitude, "Latitude")
        if longitude is not None:
            changes["longitude"] = require_float(longitude, "Longitude")
        if radius is not None:
            changes["radius"] = require_float(radius, "Radius")

        updated = replace(branch, **changes)
        validate_branch(updated)
        self._branches.update(updated)
        return updated

    def delete(self, *, current_role: Role, branch_id: int) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Forbidden: You do not have permission to perform this action.")
        if not self._branches.delete(branch_id=int(branch_id)):
            raise NotFoundError("Branch not found")
