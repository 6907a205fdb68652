from __future__ import annotations

import time
from dataclasses import asdict, replace
from datetime import date, datetime
from typing import Optional

import pytest

from hr_portal.config import testing as testing_settings
from hr_portal.container import wire
from hr_portal.employees.model import Employee, EmployeeDocuments, EmployeeInput
from hr_portal.main import create_app
from hr_portal.timesheets.model import Timesheet, TimesheetInput, TimesheetListRow


class InMemoryEmployees:
    def __init__(self, employees=()):
        self._rows: dict[int, Employee] = {e.id: e for e in employees}
        self._id = max(self._rows, default=0)

    def list_all(self):
        return [self._rows[k] for k in sorted(self._rows)]

    def list_names(self):
        return [{"id": e.id, "full_name": e.full_name} for e in sorted(self._rows.values(), key=lambda e: e.full_name)]

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._rows.get(int(employee_id))

    def create(self, *, data: EmployeeInput, documents: EmployeeDocuments) -> int:
        self._id += 1
        self._rows[self._id] = Employee(id=self._id, **asdict(data), **asdict(documents))
        return self._id

    def update(self, *, employee_id: int, data: EmployeeInput) -> bool:
        current = self._rows.get(int(employee_id))
        if not current:
            return False
        self._rows[current.id] = replace(current, **asdict(data))
        return True


class InMemoryTimesheets:
    def __init__(self, employees: InMemoryEmployees, timesheets=()):
        self._employees = employees
        self._rows: dict[int, Timesheet] = {t.id: t for t in timesheets}
        self._id = max(self._rows, default=0)

    def list_with_employees(self):
        out = []
        for t in (self._rows[k] for k in sorted(self._rows)):
            employee = self._employees.get_by_id(t.employee_id)
            out.append(
                TimesheetListRow(
                    id=t.id,
                    employee_id=t.employee_id,
                    full_name=employee.full_name,
                    start_time=t.start_time,
                    end_time=t.end_time,
                    summary=t.summary,
                )
            )
        return out

    def get_by_id(self, timesheet_id: int) -> Optional[Timesheet]:
        return self._rows.get(int(timesheet_id))

    def create(self, *, data: TimesheetInput) -> int:
        self._id += 1
        self._rows[self._id] = Timesheet(id=self._id, **asdict(data))
        return self._id

    def update(self, *, timesheet_id: int, data: TimesheetInput) -> bool:
        current = self._rows.get(int(timesheet_id))
        if not current:
            return False
        self._rows[current.id] = replace(current, **asdict(data))
        return True


@pytest.fixture
def fixed_today() -> date:
    return date(2025, 2, 15)


@pytest.fixture
def employees_repo() -> InMemoryEmployees:
    return InMemoryEmployees(
        [
            Employee(
                id=1,
                full_name="John Doe",
                email="john.doe@example.com",
                phone_number="123-456-7890",
                date_of_birth=date(1990, 1, 1),
                job_title="Software Engineer",
                department="Engineering",
                salary=80000.0,
                start_date=date(2020, 1, 1),
                photo_path="john_doe.jpg",
            ),
            Employee(
                id=2,
                full_name="Jane Smith",
                email="jane.smith@example.com",
                date_of_birth=date(1985, 5, 15),
                job_title="Product Manager",
                department="Product",
                salary=90000.0,
                start_date=date(2019, 6, 1),
            ),
            Employee(
                id=3,
                full_name="Alice Johnson",
                email="alice.johnson@example.com",
                date_of_birth=date(1988, 12, 25),
                job_title="UX Designer",
                department="Design",
                salary=75000.0,
                start_date=date(2021, 3, 15),
            ),
        ]
    )


@pytest.fixture
def timesheets_repo(employees_repo) -> InMemoryTimesheets:
    return InMemoryTimesheets(
        employees_repo,
        [
            Timesheet(1, 1, datetime(2025, 2, 10, 8, 0), datetime(2025, 2, 10, 17, 0), "Worked on backend API development"),
            Timesheet(2, 2, datetime(2025, 2, 11, 12, 0), datetime(2025, 2, 11, 17, 0), "Product roadmap planning"),
            Timesheet(3, 3, datetime(2025, 2, 12, 7, 0), datetime(2025, 2, 12, 16, 0), "Designed new user interface"),
        ],
    )


@pytest.fixture
def container(employees_repo, timesheets_repo, fixed_today):
    return wire(employees_repo, timesheets_repo, settings=testing_settings, today=lambda: fixed_today)


@pytest.fixture
def app(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def local_tz(monkeypatch):
    """Pin the process timezone (POSIX TZ string) for the duration of a test."""

    def _pin(tz: str) -> None:
        monkeypatch.setenv("TZ", tz)
        time.tzset()

    yield _pin
    monkeypatch.undo()
    time.tzset()
