from __future__ import annotations

import pytest

from absence_tracker.codes.model import AbsenceCode
from absence_tracker.employees.model import AbsenceEntry, Employee
from absence_tracker.ledger.service import AbsenceLedger


@pytest.fixture
def codes():
    return [
        AbsenceCode(code="V", value="Vacation"),
        AbsenceCode(code="T", value="Time Off"),
        AbsenceCode(code="S", value="Sick"),
    ]


@pytest.fixture
def alice():
    return Employee(
        employee_id=1,
        name="Alice",
        active=True,
        absences=(
            AbsenceEntry(date="2024-03-05", code="V"),
            AbsenceEntry(date="2024-03-05", code="T", minutes=120, comment="Dentist"),
            AbsenceEntry(date="2024-03-12", code="S", comment="Flu"),
        ),
    )


@pytest.fixture
def bob():
    return Employee(
        employee_id=2,
        name="Bob",
        active=False,
        absences=(AbsenceEntry(date="2024-03-05", code="V"),),
    )


@pytest.fixture
def ledger(alice, bob, codes):
    return AbsenceLedger([bob, alice], codes)
