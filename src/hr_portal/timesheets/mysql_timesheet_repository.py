from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_datetime
from .model import Timesheet, TimesheetInput, TimesheetListRow
from .repository import TimesheetRepository


class MySQLTimesheetRepository(TimesheetRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_with_employees(self) -> Sequence[TimesheetListRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT t.id, t.employee_id, e.full_name, t.start_time, t.end_time, t.summary
                FROM timesheets t
                JOIN employees e ON e.id = t.employee_id
                ORDER BY t.id ASC
                """
            )
            return [
                TimesheetListRow(
                    id=int(r["id"]),
                    employee_id=int(r["employee_id"]),
                    full_name=r["full_name"],
                    start_time=normalize_mysql_datetime(r["start_time"]),
                    end_time=normalize_mysql_datetime(r["end_time"]),
                    summary=r.get("summary"),
                )
                for r in fetchall(cur)
            ]

    def get_by_id(self, timesheet_id: int) -> Optional[Timesheet]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, employee_id, start_time, end_time, summary
                FROM timesheets
                WHERE id=%s
                """,
                (int(timesheet_id),),
            )
            r = fetchone(cur)
            if not r:
                return None
            return Timesheet(
                id=int(r["id"]),
                employee_id=int(r["employee_id"]),
                start_time=normalize_mysql_datetime(r["start_time"]),
                end_time=normalize_mysql_datetime(r["end_time"]),
                summary=r.get("summary"),
            )

    def create(self, *, data: TimesheetInput) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO timesheets(employee_id, start_time, end_time, summary)
                VALUES(%s,%s,%s,%s)
                """,
                (data.employee_id, data.start_time, data.end_time, data.summary),
            )
            return int(cur.lastrowid)

    def update(self, *, timesheet_id: int, data: TimesheetInput) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE timesheets
                SET employee_id=%s, start_time=%s, end_time=%s, summary=%s
                WHERE id=%s
                """,
                (data.employee_id, data.start_time, data.end_time, data.summary, int(timesheet_id)),
            )
            return cur.rowcount > 0
