from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Optional

from .common.datetime_utils import today_local
from .core.constants import DEFAULT_MINIMUM_AGE_YEARS
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .timesheets.mysql_timesheet_repository import MySQLTimesheetRepository
from .timesheets.repository import TimesheetRepository
from .timesheets.service import TimesheetService
from .validation import EmployeeRules, TimesheetRules


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    employees_repo: EmployeeRepository
    timesheets_repo: TimesheetRepository

    employee_service: EmployeeService
    timesheet_service: TimesheetService


def wire(
    employees_repo: EmployeeRepository,
    timesheets_repo: TimesheetRepository,
    *,
    settings: Any = None,
    conn: Optional[DatabaseConnection] = None,
    today: Callable[[], date] = today_local,
) -> Container:
    """Build services on top of the given repositories, rules taken from ``settings``."""

    employee_rules = EmployeeRules(
        required_fields=getattr(settings, "EMPLOYEE_REQUIRED_FIELDS", ("full_name", "email")),
        minimum_age=getattr(settings, "MINIMUM_EMPLOYEE_AGE", DEFAULT_MINIMUM_AGE_YEARS),
    )
    create_rules = TimesheetRules(
        required_fields=getattr(settings, "TIMESHEET_CREATE_REQUIRED_FIELDS", ("employee_id", "start_time", "end_time"))
    )
    update_rules = TimesheetRules(
        required_fields=getattr(
            settings, "TIMESHEET_UPDATE_REQUIRED_FIELDS", ("employee_id", "start_time", "end_time", "summary")
        )
    )

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        timesheets_repo=timesheets_repo,
        employee_service=EmployeeService(employees_repo, employee_rules, today=today),
        timesheet_service=TimesheetService(
            timesheets_repo,
            employees_repo,
            create_rules=create_rules,
            update_rules=update_rules,
        ),
    )


def build_container(*, db_config: dict, settings: Any = None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return wire(
        MySQLEmployeeRepository(conn),
        MySQLTimesheetRepository(conn),
        settings=settings,
        conn=conn,
    )
