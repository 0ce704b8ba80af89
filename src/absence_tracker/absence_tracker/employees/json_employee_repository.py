from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Sequence

from ..common.validators import optional_int, optional_text
from ..storage.json_base import read_json_array, read_json_text, write_json_array
from .model import AbsenceEntry, Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


def entry_from_row(row: Dict[str, Any]) -> AbsenceEntry:
    return AbsenceEntry(
        date=str(row.get("date") or ""),
        code=str(row.get("code") or ""),
        minutes=optional_int(row.get("minutes")),
        comment=optional_text(row.get("comment")),
    )


def entry_to_row(entry: AbsenceEntry) -> Dict[str, Any]:
    row: Dict[str, Any] = {"date": entry.date, "code": entry.code}
    if entry.minutes is not None:
        row["minutes"] = entry.minutes
    if entry.comment is not None:
        row["comment"] = entry.comment
    return row


def employee_from_row(row: Dict[str, Any]) -> Employee:
    absences = row.get("absences") or []
    return Employee(
        employee_id=optional_int(row.get("employeeId")) or 0,
        name=str(row.get("name") or ""),
        active=bool(row.get("active", True)),
        absences=tuple(entry_from_row(a) for a in absences if isinstance(a, dict)),
    )


def employee_to_row(employee: Employee) -> Dict[str, Any]:
    return {
        "employeeId": employee.employee_id,
        "name": employee.name,
        "active": employee.active,
        "absences": [entry_to_row(a) for a in employee.absences],
    }


class JsonEmployeeRepository(EmployeeRepository):
    def __init__(self, path: Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load_all(self) -> List[Employee]:
        employees = [employee_from_row(r) for r in read_json_array(self._path)]
        logger.info("Loaded %d employee records from %s", len(employees), self._path)
        return employees

    def save_all(self, employees: Sequence[Employee]) -> None:
        write_json_array(self._path, [employee_to_row(e) for e in employees])
        logger.info("Saved %d employee records to %s", len(employees), self._path)

    def read_raw(self) -> str:
        return read_json_text(self._path)
