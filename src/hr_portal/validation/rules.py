from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Iterable, Mapping, Optional

from ..common.datetime_utils import subtract_years
from ..common.validators import clean
from ..core.constants import DEFAULT_MINIMUM_AGE_YEARS, FIELD_LABELS
from ..core.enums import ValidationReason


@dataclass(frozen=True)
class FieldError:
    reason: ValidationReason
    message: str

    def to_dict(self) -> dict:
        return {"reason": self.reason.value, "message": self.message}


def label_for(field: str) -> str:
    return FIELD_LABELS.get(field, field.replace("_", " ").capitalize())


def check_required(fields: Mapping[str, Any], required: Iterable[str]) -> Dict[str, FieldError]:
    errors: Dict[str, FieldError] = {}
    for name in required:
        if not clean(fields.get(name)):
            errors[name] = FieldError(ValidationReason.MISSING_REQUIRED_FIELD, f"{label_for(name)} is required")
    return errors


def min_birth_date(today: date, minimum_age: int = DEFAULT_MINIMUM_AGE_YEARS) -> date:
    """Latest birth date that is still old enough on ``today``."""
    return subtract_years(today, minimum_age)


def check_minimum_age(
    birth_date: date,
    *,
    today: date,
    minimum_age: int = DEFAULT_MINIMUM_AGE_YEARS,
) -> Optional[FieldError]:
    if birth_date > min_birth_date(today, minimum_age):
        return FieldError(ValidationReason.UNDERAGE, f"Employee must be at least {minimum_age} years old")
    return None


def check_date_order(start, end, *, strict: bool, message: str) -> Optional[FieldError]:
    """Reject ``start > end``; with ``strict`` also reject ``start == end``.

    Either side missing means there is nothing to compare.
    """

    if start is None or end is None:
        return None
    if start > end or (strict and start == end):
        return FieldError(ValidationReason.DATE_ORDER_VIOLATION, message)
    return None


def invalid_date(field: str) -> FieldError:
    return FieldError(ValidationReason.INVALID_DATE, f"Invalid {label_for(field).lower()} format")
