from __future__ import annotations

from typing import Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Persistence interface for the employee document.

    Note: the ledger's callers depend on this interface, never on a file path.
    """

    def load_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def save_all(self, employees: Sequence[Employee]) -> None:
        raise NotImplementedError

    def read_raw(self) -> str:
        """Return the stored document as-is (JSON text)."""

        raise NotImplementedError
