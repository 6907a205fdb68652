"""Month-grid projection of timestamped events.

The grid is week-major, Sunday first. A cell is ``None`` for padding before
the 1st and after the last day of the month, otherwise a ``DayCell`` holding
the events that start on that day, in input order.
"""

from __future__ import annotations

import calendar
from collections import defaultdict
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from ..common.datetime_utils import as_local, today_local
from ..core.constants import WEEKDAY_NAMES

StartOf = Callable[[Any], Any]


def default_start_of(event: Any):
    if isinstance(event, Mapping):
        return event["start_time"]
    return event.start_time


def sunday_index(day: date) -> int:
    """0=Sunday .. 6=Saturday."""
    return (day.weekday() + 1) % 7


def local_day(timestamp) -> date:
    return as_local(timestamp).date()


@dataclass(frozen=True)
class DayCell:
    day: date
    events: Tuple[Any, ...] = ()


@dataclass(frozen=True)
class MonthGrid:
    year: int
    month: int
    weeks: Tuple[Tuple[Optional[DayCell], ...], ...]

    weekday_names = WEEKDAY_NAMES

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def title(self) -> str:
        return self.first_day.strftime("%B %Y")

    @property
    def previous_month(self) -> date:
        return (self.first_day - timedelta(days=1)).replace(day=1)

    @property
    def next_month(self) -> date:
        days = calendar.monthrange(self.year, self.month)[1]
        return self.first_day + timedelta(days=days)

    def cells(self) -> List[DayCell]:
        return [cell for week in self.weeks for cell in week if cell is not None]

    def cell_for(self, day: date) -> Optional[DayCell]:
        for cell in self.cells():
            if cell.day == day:
                return cell
        return None


def events_for_day(events: Sequence[Any], day: date, *, start_of: StartOf = default_start_of) -> List[Any]:
    return [e for e in events if local_day(start_of(e)) == day]


def build_month_grid(
    events: Sequence[Any] = (),
    *,
    reference: Optional[date] = None,
    start_of: StartOf = default_start_of,
) -> MonthGrid:
    reference = reference or today_local()
    year, month = reference.year, reference.month

    first = date(year, month, 1)
    leading = sunday_index(first)
    days_in_month = calendar.monthrange(year, month)[1]

    buckets: Dict[date, List[Any]] = defaultdict(list)
    for event in events:
        day = local_day(start_of(event))
        if day.year == year and day.month == month:
            buckets[day].append(event)

    weeks: List[Tuple[Optional[DayCell], ...]] = []
    week: List[Optional[DayCell]] = [None] * leading
    for n in range(1, days_in_month + 1):
        day = date(year, month, n)
        week.append(DayCell(day=day, events=tuple(buckets.get(day, ()))))
        if len(week) == 7:
            weeks.append(tuple(week))
            week = []
    if week:
        week.extend([None] * (7 - len(week)))
        weeks.append(tuple(week))

    return MonthGrid(year=year, month=month, weeks=tuple(weeks))
