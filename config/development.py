import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "timesheet_payroll"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))

# Payroll constants
ESI_SALARY_THRESHOLD = float(os.getenv("ESI_SALARY_THRESHOLD", "21000"))
ESI_RATE = float(os.getenv("ESI_RATE", "0.0075"))
PF_RATE = float(os.getenv("PF_RATE", "0.12"))
DEFAULT_OT_RATE = float(os.getenv("DEFAULT_OT_RATE", "70"))
MIN_MARKED_DAYS = int(os.getenv("MIN_MARKED_DAYS", "26"))
