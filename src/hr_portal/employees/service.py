from __future__ import annotations

import logging
from datetime import date
from typing import Any, Callable, Dict, List, Mapping, Optional

from werkzeug.datastructures import FileStorage
from werkzeug.utils import secure_filename

from ..common.datetime_utils import today_local
from ..common.validators import parse_identifier
from ..core.exceptions import NotFoundError
from ..validation import EmployeeRules, FieldError
from .filters import filter_employees
from .model import Employee, EmployeeDocuments
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

DOCUMENT_FIELDS = {
    "photo": "photo_path",
    "cv": "cv_path",
    "id_document": "id_document_path",
}


def documents_from_files(files: Mapping[str, Any]) -> EmployeeDocuments:
    """Keep only the (sanitized) names of uploaded files."""

    paths: Dict[str, Optional[str]] = {}
    for field, attr in DOCUMENT_FIELDS.items():
        upload = files.get(field)
        name = upload.filename if isinstance(upload, FileStorage) else upload
        paths[attr] = (secure_filename(name) or None) if name else None
    return EmployeeDocuments(**paths)


class EmployeeService:
    """Use cases: list, view, create and edit employees."""

    def __init__(
        self,
        employees: EmployeeRepository,
        rules: EmployeeRules,
        *,
        today: Callable[[], date] = today_local,
    ):
        self._employees = employees
        self._rules = rules
        self._today = today

    def max_birth_date(self) -> date:
        return self._rules.max_birth_date(self._today())

    def list_employees(self, *, employee_id: str = "", name: str = "", email: str = "") -> List[Employee]:
        return filter_employees(self._employees.list_all(), employee_id=employee_id, name=name, email=email)

    def list_names(self):
        return self._employees.list_names()

    def get_employee(self, employee_id: Any) -> Employee:
        eid = parse_identifier(employee_id, "Employee")
        employee = self._employees.get_by_id(eid)
        if not employee:
            raise NotFoundError("Employee Not Found")
        return employee

    def check(self, fields: Mapping[str, Any]) -> Dict[str, FieldError]:
        return self._rules.check(fields, today=self._today())

    def create_employee(self, fields: Mapping[str, Any], files: Optional[Mapping[str, Any]] = None) -> int:
        data = self._rules.validate(fields, today=self._today())
        documents = documents_from_files(files or {})
        employee_id = self._employees.create(data=data, documents=documents)
        logger.info("employee %s created", employee_id)
        return employee_id

    def update_employee(self, employee_id: Any, fields: Mapping[str, Any]) -> Employee:
        current = self.get_employee(employee_id)
        data = self._rules.validate(fields, today=self._today())
        if not self._employees.update(employee_id=current.id, data=data):
            raise NotFoundError("Employee Not Found")
        logger.info("employee %s updated", current.id)
        return current
