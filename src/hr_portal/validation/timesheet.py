from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from ..common.datetime_utils import as_local, try_parse_datetime
from ..common.validators import clean, optional_int, optional_text
from ..core.enums import ValidationReason
from ..core.exceptions import ValidationError
from ..timesheets.model import TimesheetInput
from .rules import FieldError, check_date_order, check_required, invalid_date, label_for

logger = logging.getLogger(__name__)


class TimesheetRules:
    """Acceptance rules for the timesheet create/edit forms.

    Which fields are required is configuration: the create and edit forms of
    the same application historically disagree about ``summary``.
    """

    def __init__(self, *, required_fields: Iterable[str] = ("employee_id", "start_time", "end_time")):
        self.required_fields = tuple(required_fields)

    def is_required(self, field: str) -> bool:
        return field in self.required_fields

    @staticmethod
    def _optional_datetime(fields: Mapping[str, Any], name: str) -> Tuple[Optional[datetime], Optional[FieldError]]:
        raw = clean(fields.get(name))
        if not raw:
            return None, None
        parsed = try_parse_datetime(raw)
        if parsed is None:
            return None, invalid_date(name)
        return as_local(parsed), None

    def validate(self, fields: Mapping[str, Any]) -> TimesheetInput:
        errors: Dict[str, FieldError] = check_required(fields, self.required_fields)

        employee_id = optional_int(fields.get("employee_id"))
        if employee_id is None and clean(fields.get("employee_id")) and self.is_required("employee_id"):
            errors["employee_id"] = FieldError(
                ValidationReason.MISSING_REQUIRED_FIELD, f"{label_for('employee_id')} is required"
            )

        start_time, start_error = self._optional_datetime(fields, "start_time")
        end_time, end_error = self._optional_datetime(fields, "end_time")
        if start_error:
            errors["start_time"] = start_error
        if end_error:
            errors["end_time"] = end_error

        # Full timestamps, equal instants rejected
        order = check_date_order(start_time, end_time, strict=True, message="End time must be after start time")
        if order:
            errors["end_time"] = order

        if errors:
            logger.debug("timesheet rejected: %s", {k: e.reason.value for k, e in errors.items()})
            raise ValidationError(errors)

        return TimesheetInput(
            employee_id=employee_id,
            start_time=start_time,
            end_time=end_time,
            summary=optional_text(fields.get("summary")),
        )

    def check(self, fields: Mapping[str, Any]) -> Dict[str, FieldError]:
        try:
            self.validate(fields)
        except ValidationError as e:
            return e.field_errors
        return {}
