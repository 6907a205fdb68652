import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "hr_portal"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo data on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))

MINIMUM_EMPLOYEE_AGE = 18
EMPLOYEE_REQUIRED_FIELDS = ("full_name", "email")
# Summary is only enforced when editing a timesheet
TIMESHEET_CREATE_REQUIRED_FIELDS = ("employee_id", "start_time", "end_time")
TIMESHEET_UPDATE_REQUIRED_FIELDS = ("employee_id", "start_time", "end_time", "summary")
