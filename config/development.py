import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", "root"),
    "database": os.getenv("DB_NAME", "hr_attendance"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Attendance policy
TIMEZONE = os.getenv("TIMEZONE", "Asia/Riyadh")
LATE_GRACE_MINUTES = int(os.getenv("LATE_GRACE_MINUTES", "5"))
EARLY_CHECKIN_MINUTES = int(os.getenv("EARLY_CHECKIN_MINUTES", "0"))
MIN_REST_MINUTES = int(os.getenv("MIN_REST_MINUTES", "60"))
OVERTIME_THRESHOLD_MINUTES = int(os.getenv("OVERTIME_THRESHOLD_MINUTES", "30"))
REQUIRE_BRANCH = bool(int(os.getenv("REQUIRE_BRANCH", "1")))

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo data on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
