from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import TIME_CODE_PREFIX


@dataclass(frozen=True)
class AbsenceEntry:
    """Domain entity: one recorded absence of one employee on one date."""

    date: str  # ISO YYYY-MM-DD
    code: str
    minutes: Optional[int] = None
    comment: Optional[str] = None

    @property
    def is_time_based(self) -> bool:
        return self.code.startswith(TIME_CODE_PREFIX)

    @property
    def display_code(self) -> str:
        """Code as shown in a grid cell, e.g. ``T120`` for 120 minutes of code ``T``."""
        if self.code and self.is_time_based and self.minutes:
            return f"{self.code}{self.minutes}"
        return self.code


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee with the full set of its absences.

    Note: records are immutable; the ledger swaps in a new record on every edit.
    """

    employee_id: int
    name: str
    active: bool = True
    absences: tuple[AbsenceEntry, ...] = ()
