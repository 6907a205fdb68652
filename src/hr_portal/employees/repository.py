from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee, EmployeeDocuments, EmployeeInput


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Note (DIP): the service layer depends on this interface, not on a concrete DB.
    """

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def list_names(self) -> Sequence[dict]:
        """``{"id", "full_name"}`` rows for employee selectors."""

        raise NotImplementedError

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def create(self, *, data: EmployeeInput, documents: EmployeeDocuments) -> int:
        raise NotImplementedError

    def update(self, *, employee_id: int, data: EmployeeInput) -> bool:
        """Update personal/employment fields; document paths are left as they are."""

        raise NotImplementedError
