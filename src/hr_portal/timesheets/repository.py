from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Timesheet, TimesheetInput, TimesheetListRow


class TimesheetRepository(Protocol):
    def list_with_employees(self) -> Sequence[TimesheetListRow]:
        """All timesheets joined with their employee's name (no filtering, no paging)."""

        raise NotImplementedError

    def get_by_id(self, timesheet_id: int) -> Optional[Timesheet]:
        raise NotImplementedError

    def create(self, *, data: TimesheetInput) -> int:
        raise NotImplementedError

    def update(self, *, timesheet_id: int, data: TimesheetInput) -> bool:
        raise NotImplementedError
