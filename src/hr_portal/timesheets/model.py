from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Timesheet:
    """Domain entity: a time-bounded work entry of one employee."""

    id: int
    employee_id: int
    start_time: datetime
    end_time: datetime
    summary: Optional[str] = None


@dataclass(frozen=True)
class TimesheetListRow:
    """Read-model for the list and calendar views (joined with employees)."""

    id: int
    employee_id: int
    full_name: str
    start_time: datetime
    end_time: datetime
    summary: Optional[str] = None

    @property
    def calendar_label(self) -> str:
        return f"{self.full_name} ({self.start_time.strftime('%H:%M')})"


@dataclass(frozen=True)
class TimesheetInput:
    employee_id: Optional[int]
    start_time: Optional[datetime]
    end_time: Optional[datetime]
    summary: Optional[str]
