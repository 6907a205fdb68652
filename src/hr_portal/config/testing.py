import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "hr_portal_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))

MINIMUM_EMPLOYEE_AGE = 18
EMPLOYEE_REQUIRED_FIELDS = ("full_name", "email")
TIMESHEET_CREATE_REQUIRED_FIELDS = ("employee_id", "start_time", "end_time")
TIMESHEET_UPDATE_REQUIRED_FIELDS = ("employee_id", "start_time", "end_time", "summary")
