from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Union

from ..core.constants import DATE_FORMAT, DATETIME_LOCAL_FORMAT, MONTH_FORMAT


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, DATE_FORMAT).date()


def parse_iso_datetime(value: str) -> datetime:
    """Parse 'YYYY-MM-DDTHH:MM[:SS]' (or with a space separator) into datetime."""
    return datetime.fromisoformat(value.strip())


def parse_month(value: str) -> date:
    """Parse YYYY-MM into the first day of that month."""
    return datetime.strptime(value, MONTH_FORMAT).date()


def try_parse_date(value: Optional[str]) -> Optional[date]:
    v = (value or "").strip()
    if not v:
        return None
    try:
        return parse_iso_date(v)
    except ValueError:
        return None


def try_parse_datetime(value: Optional[str]) -> Optional[datetime]:
    v = (value or "").strip()
    if not v:
        return None
    try:
        return parse_iso_datetime(v)
    except ValueError:
        return None


def subtract_years(day: date, years: int) -> date:
    """Same month/day ``years`` earlier; 29 Feb rolls forward to 1 Mar in non-leap years."""
    try:
        return day.replace(year=day.year - years)
    except ValueError:
        return date(day.year - years, 3, 1)


def as_local(value: Union[datetime, str]) -> datetime:
    """Coerce a stored timestamp into a naive local datetime."""
    if isinstance(value, str):
        value = parse_iso_datetime(value)
    if value.tzinfo is not None:
        value = value.astimezone().replace(tzinfo=None)
    return value


def format_date(value: Optional[date]) -> str:
    return value.strftime(DATE_FORMAT) if value else ""


def format_datetime_local(value: Optional[datetime]) -> str:
    return value.strftime(DATETIME_LOCAL_FORMAT) if value else ""


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return date.today()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
