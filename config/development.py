import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "payroll_db"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app applies database/schema.sql on startup (CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))

# Used when a staff member's business has no weekly-off setting
WEEKLY_OFF_PATTERN = os.getenv("WEEKLY_OFF_PATTERN", "standard")

# Percentages applied to new salary structures (see DefaultRatePolicy)
DEFAULT_RATES = {
    "employer_pf_rate": 13,
    "employer_esi_rate": 3.25,
    "employee_pf_rate": 12,
    "employee_esi_rate": 0.75,
    "gratuity_rate": 4.81,
    "statutory_bonus_rate": 8.33,
}

LATE_FINE = {
    "enabled": True,
    "grace_minutes": int(os.getenv("LATE_GRACE_MINUTES", "0")),
    "calculation_type": "shift_based",
    "default_shift_start": "09:30",
    "default_shift_end": "18:30",
    "rules": [],
}
