from __future__ import annotations

from enum import Enum


class ValidationReason(str, Enum):
    """Why a submitted field was rejected."""

    INVALID_DATE = "INVALID_DATE"
    UNDERAGE = "UNDERAGE"
    DATE_ORDER_VIOLATION = "DATE_ORDER_VIOLATION"
    MISSING_REQUIRED_FIELD = "MISSING_REQUIRED_FIELD"
    NOT_FOUND = "NOT_FOUND"


class TimesheetView(str, Enum):
    TABLE = "table"
    CALENDAR = "calendar"
