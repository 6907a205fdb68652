import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "hr_portal"),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))

MINIMUM_EMPLOYEE_AGE = int(os.getenv("MINIMUM_EMPLOYEE_AGE", "18"))
EMPLOYEE_REQUIRED_FIELDS = ("full_name", "email")
TIMESHEET_CREATE_REQUIRED_FIELDS = ("employee_id", "start_time", "end_time")
TIMESHEET_UPDATE_REQUIRED_FIELDS = ("employee_id", "start_time", "end_time", "summary")
