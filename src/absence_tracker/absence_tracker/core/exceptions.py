from __future__ import annotations

from pathlib import Path
from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class PersistenceError(Exception):
    """Base exception for failures reading or writing a JSON document."""

    def __init__(self, message: str, *, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class LoadError(PersistenceError):
    """Raised when a document is missing, unreadable or not valid JSON."""


class SaveError(PersistenceError):
    """Raised when a document cannot be written."""
