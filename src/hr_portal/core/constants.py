"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_MINIMUM_AGE_YEARS = 18

DATE_FORMAT = "%Y-%m-%d"
DATETIME_LOCAL_FORMAT = "%Y-%m-%dT%H:%M"
MONTH_FORMAT = "%Y-%m"

# Column order of the calendar grid, index 0 = Sunday
WEEKDAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

FIELD_LABELS = {
    "full_name": "Full name",
    "email": "Email",
    "phone_number": "Phone number",
    "date_of_birth": "Date of birth",
    "job_title": "Job title",
    "department": "Department",
    "salary": "Salary",
    "start_date": "Start date",
    "end_date": "End date",
    "employee_id": "Employee",
    "start_time": "Start time",
    "end_time": "End time",
    "summary": "Summary",
}
