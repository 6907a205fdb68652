from __future__ import annotations

from typing import Mapping, TYPE_CHECKING

if TYPE_CHECKING:
    from ..validation.rules import FieldError


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when submitted fields are invalid.

    Carries a field-keyed map of errors; ``str()`` joins their messages.
    """

    def __init__(self, field_errors: Mapping[str, "FieldError"]):
        self.field_errors = dict(field_errors)
        super().__init__(", ".join(e.message for e in self.field_errors.values()))


class NotFoundError(DomainError):
    """Raised when an id in a detail route does not resolve to a record."""


class InvalidIdentifierError(DomainError):
    """Raised when an id in a path is not numeric."""


class PersistenceError(DomainError):
    """Raised when the store rejects a read or write; message is the driver's."""
