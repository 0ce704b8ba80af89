"""Add demo employees and absence codes through the ledger and save them."""

from __future__ import annotations

import importlib
from pathlib import Path

from config import get_settings_module

from absence_tracker.codes.json_code_repository import JsonCodeRepository
from absence_tracker.employees.json_employee_repository import JsonEmployeeRepository
from absence_tracker.ledger.persistence import LedgerPersistenceService
from absence_tracker.ledger.service import AbsenceLedger

DEMO_CODES = [("S", "Sick"), ("T", "Time Off (minutes)"), ("U", "Unpaid Leave"), ("V", "Vacation")]
DEMO_EMPLOYEES = ["Alice", "Bob", "Carol"]


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    persistence = LedgerPersistenceService(
        JsonEmployeeRepository(Path(settings.DATA_CONFIG["employees_file"])),
        JsonCodeRepository(Path(settings.DATA_CONFIG["codes_file"])),
    )

    ledger = AbsenceLedger()
    persistence.load_into(ledger)

    known_codes = {c.code for c in ledger.codes()}
    for code, value in DEMO_CODES:
        if code not in known_codes:
            ledger.add_code(code, value)

    known_names = {e.name for e in ledger.employees()}
    for name in DEMO_EMPLOYEES:
        if name not in known_names:
            ledger.add_employee(name)
    persistence.save(ledger)
    print(f"OK: Seeded {len(ledger.employees())} employees, {len(ledger.codes())} codes")


if __name__ == "__main__":
    main()
