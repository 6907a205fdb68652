from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: a person record with personal and employment fields."""

    id: int
    full_name: str
    email: str
    phone_number: Optional[str] = None
    date_of_birth: Optional[date] = None
    job_title: Optional[str] = None
    department: Optional[str] = None
    salary: Optional[float] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    photo_path: Optional[str] = None
    cv_path: Optional[str] = None
    id_document_path: Optional[str] = None


@dataclass(frozen=True)
class EmployeeInput:
    """Normalized, validated employee fields from a create/edit form."""

    full_name: str
    email: str
    phone_number: Optional[str]
    date_of_birth: date
    job_title: Optional[str]
    department: Optional[str]
    salary: Optional[float]
    start_date: Optional[date]
    end_date: Optional[date]


@dataclass(frozen=True)
class EmployeeDocuments:
    """File names of uploaded documents; the files themselves are not stored."""

    photo_path: Optional[str] = None
    cv_path: Optional[str] = None
    id_document_path: Optional[str] = None
