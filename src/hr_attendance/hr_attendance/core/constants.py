"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SESSION_DAYS = 7
DEFAULT_HISTORY_LIMIT = 30
DEFAULT_LATE_GRACE_MINUTES = 5
DEFAULT_EARLY_CHECKIN_MINUTES = 0
DEFAULT_MIN_REST_MINUTES = 60
DEFAULT_OVERTIME_THRESHOLD_MINUTES = 30
DEFAULT_TIMEZONE = "Asia/Riyadh"
DEFAULT_PAGE_SIZE = 20

# Mean earth radius used by the haversine formula (metres).
EARTH_RADIUS_METERS = 6371e3

DEFAULT_VACATIONS_IN_YEAR = 21
DEFAULT_DAY_WORKING_HOURS = 8
DEFAULT_EXTRA_AND_LATE_HOUR_RATE = 1.5
# Friday, Saturday
DEFAULT_WEEKEND_DAYS = (4, 5)
