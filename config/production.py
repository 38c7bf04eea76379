import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "payroll_db"),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))

WEEKLY_OFF_PATTERN = os.getenv("WEEKLY_OFF_PATTERN", "standard")

DEFAULT_RATES = {
    "employer_pf_rate": 13,
    "employer_esi_rate": 3.25,
    "employee_pf_rate": 12,
    "employee_esi_rate": 0.75,
    "gratuity_rate": 4.81,
    "statutory_bonus_rate": 8.33,
}

LATE_FINE = {
    "enabled": bool(int(os.getenv("LATE_FINE_ENABLED", "1"))),
    "grace_minutes": int(os.getenv("LATE_GRACE_MINUTES", "0")),
    "calculation_type": os.getenv("LATE_FINE_CALCULATION", "shift_based"),
    "default_shift_start": os.getenv("DEFAULT_SHIFT_START", "09:30"),
    "default_shift_end": os.getenv("DEFAULT_SHIFT_END", "18:30"),
    "rules": [],
}
