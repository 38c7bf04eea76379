import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "payroll_test_db"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False

WEEKLY_OFF_PATTERN = "standard"

DEFAULT_RATES = {}

LATE_FINE = {
    "enabled": True,
    "grace_minutes": 0,
    "calculation_type": "per_minute",
    "rate_per_minute": 2,
    "default_shift_start": "09:30",
    "default_shift_end": "18:30",
}
