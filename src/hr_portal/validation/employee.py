from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from ..common.datetime_utils import try_parse_date
from ..common.validators import clean, optional_float, optional_text
from ..core.constants import DEFAULT_MINIMUM_AGE_YEARS
from ..core.exceptions import ValidationError
from ..employees.model import EmployeeInput
from .rules import FieldError, check_date_order, check_minimum_age, check_required, invalid_date, min_birth_date

logger = logging.getLogger(__name__)


class EmployeeRules:
    """Acceptance rules for the employee create/edit forms."""

    def __init__(
        self,
        *,
        required_fields: Iterable[str] = ("full_name", "email"),
        minimum_age: int = DEFAULT_MINIMUM_AGE_YEARS,
    ):
        self.required_fields = tuple(required_fields)
        self.minimum_age = int(minimum_age)

    def max_birth_date(self, today: date) -> date:
        return min_birth_date(today, self.minimum_age)

    @staticmethod
    def _optional_date(fields: Mapping[str, Any], name: str) -> Tuple[Optional[date], Optional[FieldError]]:
        raw = clean(fields.get(name))
        if not raw:
            return None, None
        parsed = try_parse_date(raw)
        if parsed is None:
            return None, invalid_date(name)
        return parsed, None

    def validate(self, fields: Mapping[str, Any], *, today: date) -> EmployeeInput:
        errors: Dict[str, FieldError] = check_required(fields, self.required_fields)

        birth_date = try_parse_date(fields.get("date_of_birth"))
        if birth_date is None:
            errors["date_of_birth"] = invalid_date("date_of_birth")
        else:
            underage = check_minimum_age(birth_date, today=today, minimum_age=self.minimum_age)
            if underage:
                errors["date_of_birth"] = underage

        start_date, start_error = self._optional_date(fields, "start_date")
        end_date, end_error = self._optional_date(fields, "end_date")
        if start_error:
            errors["start_date"] = start_error
        if end_error:
            errors["end_date"] = end_error

        order = check_date_order(start_date, end_date, strict=False, message="Start date must be before end date")
        if order:
            errors["end_date"] = order

        if errors:
            logger.debug("employee rejected: %s", {k: e.reason.value for k, e in errors.items()})
            raise ValidationError(errors)

        return EmployeeInput(
            full_name=clean(fields.get("full_name")),
            email=clean(fields.get("email")),
            phone_number=optional_text(fields.get("phone_number")),
            date_of_birth=birth_date,
            job_title=optional_text(fields.get("job_title")),
            department=optional_text(fields.get("department")),
            salary=optional_float(fields.get("salary")),
            start_date=start_date,
            end_date=end_date,
        )

    def check(self, fields: Mapping[str, Any], *, today: date) -> Dict[str, FieldError]:
        """Same as ``validate`` but returns the error map instead of raising."""
        try:
            self.validate(fields, today=today)
        except ValidationError as e:
            return e.field_errors
        return {}
