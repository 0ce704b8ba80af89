from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, Optional, Union

from ..codes.model import AbsenceCode
from ..common.datetime_utils import try_parse_iso_date
from ..common.validators import optional_text, require_non_empty
from ..employees.model import AbsenceEntry, Employee

logger = logging.getLogger(__name__)

# An employee is addressed by employeeId, or by name as a UI convenience.
EmployeeRef = Union[int, str]


def _normalize_entry(entry: AbsenceEntry, date: str) -> Optional[AbsenceEntry]:
    code = (entry.code or "").strip()
    if not code:
        return None
    normalized = AbsenceEntry(date=date, code=code, comment=optional_text(entry.comment))
    if normalized.is_time_based and entry.minutes is not None:
        normalized = replace(normalized, minutes=int(entry.minutes))
    return normalized


def count_code_in_month(employee: Employee, code: str, year: int, month: int) -> int:
    count = 0
    for a in employee.absences:
        if a.code != code:
            continue
        d = try_parse_iso_date(a.date)
        if d and d.year == int(year) and d.month == int(month):
            count += 1
    return count


class AbsenceLedger:
    """In-memory employee and absence-code collections.

    Use cases: query a day/month window, reconcile the edited entries of one
    employee on one date, aggregate counts for the summary and tally views.
    The ledger holds no file handles; loading and saving go through
    :class:`~absence_tracker.ledger.persistence.LedgerPersistenceService`.
    """

    def __init__(self, employees: Iterable[Employee] = (), codes: Iterable[AbsenceCode] = ()):
        self._employees: list[Employee] = []
        self._codes: list[AbsenceCode] = []
        self._last_issued_id = 0
        self.load_initial_state(employees, codes)

    # ----- state -----

    def load_initial_state(self, employee_records: Iterable[Employee], code_records: Iterable[AbsenceCode]) -> None:
        """Replace all state; employees sorted by name, codes by code (case-insensitive, stable)."""

        employees = sorted(employee_records, key=lambda e: (e.name or "").casefold())
        self._codes = sorted(code_records, key=lambda c: (c.code or "").casefold())

        # Missing or repeated ids get fresh ones above every id seen so far.
        next_id = max([self._last_issued_id] + [e.employee_id for e in employees])
        seen: set[int] = set()
        for i, e in enumerate(employees):
            if e.employee_id <= 0 or e.employee_id in seen:
                next_id += 1
                logger.warning("Employee %r has missing or duplicate id %r; assigned %d", e.name, e.employee_id, next_id)
                employees[i] = replace(e, employee_id=next_id)
            seen.add(employees[i].employee_id)

        self._employees = employees
        self._last_issued_id = next_id

    def employees(self) -> list[Employee]:
        return list(self._employees)

    def active_employees(self) -> list[Employee]:
        return [e for e in self._employees if e.active]

    def codes(self) -> list[AbsenceCode]:
        return list(self._codes)

    def find_employee(self, employee: EmployeeRef) -> Optional[Employee]:
        idx = self._index_of(employee)
        return None if idx is None else self._employees[idx]

    def _index_of(self, employee: EmployeeRef) -> Optional[int]:
        if isinstance(employee, int) and not isinstance(employee, bool):
            for i, e in enumerate(self._employees):
                if e.employee_id == employee:
                    return i
            return None

        # Names are not guaranteed unique: resolve to the first match, then key on its id.
        for e in self._employees:
            if e.name == employee:
                return self._index_of(e.employee_id)
        return None

    # ----- queries -----

    def entries_for_employee_on_date(self, employee: EmployeeRef, date: str) -> list[AbsenceEntry]:
        found = self.find_employee(employee)
        if not found:
            return []
        return [a for a in found.absences if a.date == date]

    def edit_entries_for(self, employee: EmployeeRef, date: str) -> list[AbsenceEntry]:
        """Seed an edit session: existing entries, or one blank placeholder row."""
        entries = self.entries_for_employee_on_date(employee, date)
        return entries or [AbsenceEntry(date=date, code="", comment="")]

    def tally_by_code(self, employee: EmployeeRef, code: str, year: int, month: int) -> int:
        """Count one employee's entries with ``code`` inside a year and 1-based month."""
        found = self.find_employee(employee)
        if not found:
            return 0
        return count_code_in_month(found, code, year, month)

    def daily_tally(self, code: str, date: str) -> int:
        """Entries matching ``code`` on ``date`` summed over active employees only."""
        return sum(
            1
            for e in self._employees
            if e.active
            for a in e.absences
            if a.date == date and a.code == code
        )

    def absence_years(self) -> list[int]:
        years = set()
        for e in self._employees:
            for a in e.absences:
                d = try_parse_iso_date(a.date)
                if d:
                    years.add(d.year)
        return sorted(years)

    # ----- mutations -----

    def reconcile_date(self, employee: EmployeeRef, date: str, new_entries: Iterable[AbsenceEntry]) -> bool:
        """Swap all entries of one employee on ``date`` for ``new_entries``.

        Entries with a blank code are dropped; entries of other dates and other
        employees are untouched. Returns False (no-op) for an unknown employee.
        """

        idx = self._index_of(employee)
        if idx is None:
            logger.warning("Reconcile skipped: employee %r not found", employee)
            return False

        added: list[AbsenceEntry] = []
        for entry in new_entries:
            normalized = _normalize_entry(entry, date)
            if normalized is not None:
                added.append(normalized)

        current = self._employees[idx]
        kept = [a for a in current.absences if a.date != date]
        self._employees[idx] = replace(current, absences=tuple(kept + added))

        logger.info("Reconciled %s on %s (%d entries)", current.name, date, len(added))
        return True

    def add_employee(self, name: str, active: bool = True) -> Employee:
        name = require_non_empty(name, "Employee name")

        new_id = max([self._last_issued_id] + [e.employee_id for e in self._employees]) + 1
        employee = Employee(employee_id=new_id, name=name, active=bool(active))
        self._employees.append(employee)
        self._last_issued_id = new_id

        logger.info("Added employee %s (id=%d)", name, new_id)
        return employee

    def set_active(self, employee: EmployeeRef, active: bool) -> bool:
        idx = self._index_of(employee)
        if idx is None:
            return False
        self._employees[idx] = replace(self._employees[idx], active=bool(active))
        return True

    def add_code(self, code: str, value: str) -> AbsenceCode:
        entry = AbsenceCode(
            code=require_non_empty(code, "Absence code"),
            value=require_non_empty(value, "Absence value"),
        )
        self._codes.append(entry)
        return entry

    def remove_code(self, index: int) -> Optional[AbsenceCode]:
        """Remove the catalog entry at ``index``; existing absences keep their code."""
        if not 0 <= index < len(self._codes):
            return None
        return self._codes.pop(index)
