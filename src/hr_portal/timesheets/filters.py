from __future__ import annotations

from typing import Iterable, List

from ..common.validators import clean
from .model import TimesheetListRow


def filter_timesheets(
    rows: Iterable[TimesheetListRow],
    *,
    timesheet_id: str = "",
    employee_id: str = "",
) -> List[TimesheetListRow]:
    """Exact-match filters on timesheet id and employee id; blank matches all."""

    timesheet_id = clean(timesheet_id)
    employee_id = clean(employee_id)
    return [
        r
        for r in rows
        if (not timesheet_id or str(r.id) == timesheet_id) and (not employee_id or str(r.employee_id) == employee_id)
    ]
