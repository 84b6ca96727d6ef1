from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""

    kind = "domain_error"

    def __init__(self, message: str = "", *, stage: Optional[str] = None):
        super().__init__(message)
        self.stage = stage


class ValidationError(DomainError):
    """Raised when input data is invalid or a required field is missing."""

    kind = "validation_failure"


class NotFoundError(DomainError):
    """Raised when an employee, company, template or document does not exist."""

    kind = "not_found"


class RenderError(DomainError):
    """Raised when HTML cannot be turned into a PDF."""

    kind = "render_failure"


class StorageError(DomainError):
    """Raised when an upload or the metadata insert that follows it fails."""

    kind = "store_failure"


class DataAccessError(DomainError):
    """Raised when the hosted database rejects a query."""

    kind = "data_access_failure"
