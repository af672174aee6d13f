"""Geofencing: great-circle distance and branch radius checks."""

from __future__ import annotations

import math

from ..core.constants import EARTH_RADIUS_METERS
from ..core.exceptions import ValidationError
from .model import Branch, LocationCheck, LocationData

OUTSIDE_LOCATION_MESSAGE = "You are outside the allowed work location"


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Distance in metres between two WGS84 points."""

    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_METERS * c


def validate_coordinates(latitude: float, longitude: float) -> None:
    if not -90 <= latitude <= 90:
        raise ValidationError("Latitude must be between -90 and 90")
    if not -180 <= longitude <= 180:
        raise ValidationError("Longitude must be between -180 and 180")


def validate_location(location: LocationData, branch: Branch) -> LocationCheck:
    distance = haversine_distance(location.latitude, location.longitude, branch.latitude, branch.longitude)
    if distance <= branch.radius:
        return LocationCheck(is_within_location=True, distance=distance, location_name=branch.name)
    return LocationCheck(is_within_location=False, distance=distance, error_message=OUTSIDE_LOCATION_MESSAGE)


def validate_branch(branch: Branch) -> None:
    if not branch.name or not branch.name.strip():
        raise ValidationError("Branch name is required")
    if branch.latitude == 0 and branch.longitude == 0:
        raise ValidationError("Branch location is required")
    validate_coordinates(branch.latitude, branch.longitude)
    if not math.isfinite(branch.radius) or branch.radius <= 0:
        raise ValidationError("Branch radius must be greater than zero")
