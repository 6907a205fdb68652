from __future__ import annotations

from typing import Any, Optional

from ..core.exceptions import InvalidIdentifierError


def clean(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def optional_text(value: Any) -> Optional[str]:
    v = clean(value)
    return v or None


def optional_float(value: Any) -> Optional[float]:
    v = clean(value)
    if not v:
        return None
    try:
        return float(v)
    except ValueError:
        return None


def optional_int(value: Any) -> Optional[int]:
    v = clean(value)
    if not (v.isascii() and v.isdigit()):
        return None
    return int(v)


def parse_identifier(value: Any, label: str) -> int:
    """Path ids must be plain non-negative integers."""
    parsed = optional_int(value)
    if parsed is None:
        raise InvalidIdentifierError(f"Invalid {label} ID")
    return parsed
