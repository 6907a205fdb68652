from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, List, Mapping, Optional

from ..calendar_view.grid import MonthGrid, build_month_grid
from ..common.validators import optional_int, parse_identifier
from ..core.enums import ValidationReason
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from ..validation import FieldError, TimesheetRules
from .filters import filter_timesheets
from .model import Timesheet, TimesheetInput, TimesheetListRow
from .repository import TimesheetRepository

logger = logging.getLogger(__name__)


class TimesheetService:
    """Use cases: list (table/calendar), view, create and edit timesheets."""

    def __init__(
        self,
        timesheets: TimesheetRepository,
        employees: EmployeeRepository,
        *,
        create_rules: TimesheetRules,
        update_rules: TimesheetRules,
    ):
        self._timesheets = timesheets
        self._employees = employees
        self.create_rules = create_rules
        self.update_rules = update_rules

    def list_timesheets(self, *, timesheet_id: str = "", employee_id: str = "") -> List[TimesheetListRow]:
        return filter_timesheets(
            self._timesheets.list_with_employees(), timesheet_id=timesheet_id, employee_id=employee_id
        )

    @staticmethod
    def calendar(rows: List[TimesheetListRow], *, reference: Optional[date] = None) -> MonthGrid:
        return build_month_grid(rows, reference=reference, start_of=lambda r: r.start_time)

    def employee_choices(self):
        return self._employees.list_names()

    def get_timesheet(self, timesheet_id: Any) -> Timesheet:
        tid = parse_identifier(timesheet_id, "timesheet")
        timesheet = self._timesheets.get_by_id(tid)
        if not timesheet:
            raise NotFoundError("Timesheet not found")
        return timesheet

    def _reference_errors(self, fields: Mapping[str, Any]) -> Dict[str, FieldError]:
        employee_id = optional_int(fields.get("employee_id"))
        if employee_id is None or self._employees.get_by_id(employee_id) is not None:
            return {}
        return {"employee_id": FieldError(ValidationReason.NOT_FOUND, "Selected employee does not exist")}

    def _validate(self, rules: TimesheetRules, fields: Mapping[str, Any]) -> TimesheetInput:
        errors: Dict[str, FieldError] = {}
        data = None
        try:
            data = rules.validate(fields)
        except ValidationError as e:
            errors.update(e.field_errors)

        for field, error in self._reference_errors(fields).items():
            errors.setdefault(field, error)

        if errors:
            raise ValidationError(errors)
        return data

    def check(self, fields: Mapping[str, Any], *, for_update: bool = False) -> Dict[str, FieldError]:
        rules = self.update_rules if for_update else self.create_rules
        try:
            self._validate(rules, fields)
        except ValidationError as e:
            return e.field_errors
        return {}

    def create_timesheet(self, fields: Mapping[str, Any]) -> int:
        data = self._validate(self.create_rules, fields)
        timesheet_id = self._timesheets.create(data=data)
        logger.info("timesheet %s created for employee %s", timesheet_id, data.employee_id)
        return timesheet_id

    def update_timesheet(self, timesheet_id: Any, fields: Mapping[str, Any]) -> Timesheet:
        current = self.get_timesheet(timesheet_id)
        data = self._validate(self.update_rules, fields)
        if not self._timesheets.update(timesheet_id=current.id, data=data):
            raise NotFoundError("Timesheet not found")
        logger.info("timesheet %s updated", current.id)
        return current
