from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Branch:
    """Domain entity: a work location with its allowed check-in radius (metres)."""

    branch_id: int
    name: str
    latitude: float
    longitude: float
    radius: float

    def to_dict(self) -> dict:
        return {
            "id": self.branch_id,
            "name": self.name,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "radius": self.radius,
        }


@dataclass(frozen=True)
class LocationData:
    """A position reported by the employee's device."""

    latitude: float
    longitude: float
    accuracy: Optional[float] = None
    timestamp: Optional[int] = None


@dataclass(frozen=True)
class LocationCheck:
    is_within_location: bool
    distance: float
    location_name: Optional[str] = None
    error_message: Optional[str] = None
