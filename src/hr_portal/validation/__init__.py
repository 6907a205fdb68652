"""Field validation shared by the pre-submit check and the services.

Rules here are pure: "today" is always passed in, nothing touches the store.
"""

from .employee import EmployeeRules
from .rules import FieldError
from .timesheet import TimesheetRules

__all__ = ["EmployeeRules", "FieldError", "TimesheetRules"]
