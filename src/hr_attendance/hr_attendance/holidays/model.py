from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Holiday:
    """Official (company-wide) day off."""

    holiday_id: int
    name: str
    day: date
