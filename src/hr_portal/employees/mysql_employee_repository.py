from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date
from .model import Employee, EmployeeDocuments, EmployeeInput
from .repository import EmployeeRepository

_COLUMNS = """
    id, full_name, email, phone_number, date_of_birth, job_title, department,
    salary, start_date, end_date, photo_path, cv_path, id_document_path
"""


def _to_employee(row: Dict[str, Any]) -> Employee:
    salary = row.get("salary")
    return Employee(
        id=int(row["id"]),
        full_name=row["full_name"],
        email=row["email"],
        phone_number=row.get("phone_number"),
        date_of_birth=normalize_mysql_date(row.get("date_of_birth")),
        job_title=row.get("job_title"),
        department=row.get("department"),
        salary=float(salary) if salary is not None else None,
        start_date=normalize_mysql_date(row.get("start_date")),
        end_date=normalize_mysql_date(row.get("end_date")),
        photo_path=row.get("photo_path"),
        cv_path=row.get("cv_path"),
        id_document_path=row.get("id_document_path"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees ORDER BY id ASC")
            return [_to_employee(r) for r in fetchall(cur)]

    def list_names(self) -> Sequence[dict]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, full_name FROM employees ORDER BY full_name ASC")
            return [{"id": int(r["id"]), "full_name": r["full_name"]} for r in fetchall(cur)]

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE id=%s", (int(employee_id),))
            row = fetchone(cur)
            if not row:
                return None
            return _to_employee(row)

    def create(self, *, data: EmployeeInput, documents: EmployeeDocuments) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(
                    full_name, email, phone_number, date_of_birth, job_title, department,
                    salary, start_date, end_date, photo_path, cv_path, id_document_path
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    data.full_name,
                    data.email,
                    data.phone_number,
                    data.date_of_birth,
                    data.job_title,
                    data.department,
                    data.salary,
                    data.start_date,
                    data.end_date,
                    documents.photo_path,
                    documents.cv_path,
                    documents.id_document_path,
                ),
            )
            return int(cur.lastrowid)

    def update(self, *, employee_id: int, data: EmployeeInput) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE employees
                SET full_name=%s, email=%s, phone_number=%s, date_of_birth=%s, job_title=%s,
                    department=%s, salary=%s, start_date=%s, end_date=%s
                WHERE id=%s
                """,
                (
                    data.full_name,
                    data.email,
                    data.phone_number,
                    data.date_of_birth,
                    data.job_title,
                    data.department,
                    data.salary,
                    data.start_date,
                    data.end_date,
                    int(employee_id),
                ),
            )
            return cur.rowcount > 0
