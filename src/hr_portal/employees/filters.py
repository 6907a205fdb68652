from __future__ import annotations

from typing import Iterable, List

from ..common.validators import clean
from .model import Employee


def filter_employees(
    employees: Iterable[Employee],
    *,
    employee_id: str = "",
    name: str = "",
    email: str = "",
) -> List[Employee]:
    """Filter an already-fetched employee list.

    id is an exact match on its text form; name and email are case-insensitive
    substring matches. Blank filters match everything.
    """

    employee_id = clean(employee_id)
    name = clean(name).lower()
    email = clean(email).lower()

    out: List[Employee] = []
    for e in employees:
        if employee_id and str(e.id) != employee_id:
            continue
        if name and name not in (e.full_name or "").lower():
            continue
        if email and email not in (e.email or "").lower():
            continue
        out.append(e)
    return out
