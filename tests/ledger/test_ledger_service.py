from __future__ import annotations

import pytest

from absence_tracker.codes.model import AbsenceCode
from absence_tracker.core.exceptions import ValidationError
from absence_tracker.employees.model import AbsenceEntry, Employee
from absence_tracker.ledger.service import AbsenceLedger


def test_load_sorts_employees_and_codes_case_insensitive():
    ledger = AbsenceLedger(
        [Employee(1, "carol"), Employee(2, "Alice"), Employee(3, "bob")],
        [AbsenceCode("v", "Vacation"), AbsenceCode("S", "Sick"), AbsenceCode("T", "Time")],
    )

    assert [e.name for e in ledger.employees()] == ["Alice", "bob", "carol"]
    assert [c.code for c in ledger.codes()] == ["S", "T", "v"]


def test_load_sort_is_stable_for_equal_names():
    ledger = AbsenceLedger([Employee(7, "Sam"), Employee(3, "sam")])
    assert [e.employee_id for e in ledger.employees()] == [7, 3]


def test_entries_for_employee_on_date_returns_all_matches(ledger):
    entries = ledger.entries_for_employee_on_date("Alice", "2024-03-05")

    assert [e.code for e in entries] == ["V", "T"]


def test_entries_for_unknown_employee_is_empty(ledger):
    assert ledger.entries_for_employee_on_date("Nobody", "2024-03-05") == []
    assert ledger.entries_for_employee_on_date(99, "2024-03-05") == []


def test_edit_entries_seed_blank_placeholder(ledger):
    seed = ledger.edit_entries_for(1, "2024-03-06")

    assert seed == [AbsenceEntry(date="2024-03-06", code="", comment="")]


def test_reconcile_replaces_all_entries_on_that_date(ledger):
    assert ledger.reconcile_date("Alice", "2024-03-05", [AbsenceEntry(date="", code="V")])

    assert ledger.entries_for_employee_on_date("Alice", "2024-03-05") == [
        AbsenceEntry(date="2024-03-05", code="V")
    ]


def test_reconcile_keeps_other_dates_and_employees(ledger, bob):
    ledger.reconcile_date(1, "2024-03-05", [])

    assert [e.code for e in ledger.entries_for_employee_on_date(1, "2024-03-12")] == ["S"]
    assert ledger.find_employee(2) == bob


def test_reconcile_drops_blank_codes_and_keeps_duplicates(ledger):
    edits = [
        AbsenceEntry(date="2024-03-07", code="T", minutes=30),
        AbsenceEntry(date="2024-03-07", code="  "),
        AbsenceEntry(date="2024-03-07", code="T", minutes=45, comment="afternoon"),
    ]

    ledger.reconcile_date(1, "2024-03-07", edits)

    saved = ledger.entries_for_employee_on_date(1, "2024-03-07")
    assert saved == [
        AbsenceEntry(date="2024-03-07", code="T", minutes=30),
        AbsenceEntry(date="2024-03-07", code="T", minutes=45, comment="afternoon"),
    ]


def test_reconcile_ignores_minutes_on_full_day_codes(ledger):
    ledger.reconcile_date(1, "2024-03-08", [AbsenceEntry(date="2024-03-08", code="V", minutes=60)])

    assert ledger.entries_for_employee_on_date(1, "2024-03-08")[0].minutes is None


def test_reconcile_is_idempotent(ledger):
    edits = [AbsenceEntry(date="2024-03-09", code="S", comment="cold")]

    ledger.reconcile_date(1, "2024-03-09", edits)
    first = ledger.employees()
    ledger.reconcile_date(1, "2024-03-09", edits)

    assert ledger.employees() == first


def test_reconcile_unknown_employee_is_noop(ledger):
    before = ledger.employees()

    assert ledger.reconcile_date("Nobody", "2024-03-05", [AbsenceEntry(date="", code="V")]) is False
    assert ledger.employees() == before


def test_name_lookup_resolves_first_of_duplicates():
    ledger = AbsenceLedger([Employee(1, "Sam"), Employee(2, "Sam")])

    ledger.reconcile_date("Sam", "2024-01-02", [AbsenceEntry(date="", code="V")])

    assert ledger.entries_for_employee_on_date(1, "2024-01-02")
    assert not ledger.entries_for_employee_on_date(2, "2024-01-02")


def test_tally_by_code_counts_within_month(ledger):
    ledger.reconcile_date(1, "2024-04-01", [AbsenceEntry(date="", code="V")])

    assert ledger.tally_by_code("Alice", "V", 2024, 3) == 1
    assert ledger.tally_by_code("Alice", "V", 2024, 4) == 1
    assert ledger.tally_by_code("Alice", "V", 2023, 3) == 0
    assert ledger.tally_by_code("Nobody", "V", 2024, 3) == 0


def test_daily_tally_ignores_inactive_employees(ledger):
    assert ledger.daily_tally("V", "2024-03-05") == 1


def test_daily_tally_sums_active_employees(ledger):
    ledger.set_active("Bob", True)

    assert ledger.daily_tally("V", "2024-03-05") == 2
    assert ledger.daily_tally("V", "2024-03-06") == 0


def test_add_employee_assigns_next_id(ledger):
    first = ledger.add_employee("Dave")
    second = ledger.add_employee("Eve", active=False)

    assert first.employee_id == 3
    assert second.employee_id == 4
    assert second.active is False
    assert ledger.find_employee(4).absences == ()


def test_add_employee_on_empty_ledger_starts_at_one():
    assert AbsenceLedger().add_employee("First").employee_id == 1


def test_add_employee_never_reuses_ids_after_reload():
    ledger = AbsenceLedger([Employee(5, "Ann")])
    ledger.add_employee("Ben")

    ledger.load_initial_state([Employee(1, "Cy")], [])

    assert ledger.add_employee("Dee").employee_id == 7


def test_add_employee_blank_name_rejected(ledger):
    before = ledger.employees()

    with pytest.raises(ValidationError):
        ledger.add_employee("   ")
    assert ledger.employees() == before


def test_set_active_unknown_employee_is_noop(ledger):
    assert ledger.set_active(42, False) is False


def test_add_code_allows_duplicates_and_rejects_blanks(ledger):
    ledger.add_code("V", "Vacation again")

    assert [c.code for c in ledger.codes()].count("V") == 2
    with pytest.raises(ValidationError):
        ledger.add_code("X", "")
    with pytest.raises(ValidationError):
        ledger.add_code("", "Something")


def test_remove_code_does_not_cascade(ledger):
    index = [c.code for c in ledger.codes()].index("V")

    removed = ledger.remove_code(index)

    assert removed.code == "V"
    assert "V" not in [c.code for c in ledger.codes()]
    assert [e.code for e in ledger.entries_for_employee_on_date(1, "2024-03-05")] == ["V", "T"]


def test_remove_code_unknown_index_is_noop(ledger):
    before = ledger.codes()

    assert ledger.remove_code(10) is None
    assert ledger.remove_code(-1) is None
    assert ledger.codes() == before


def test_absence_years(ledger):
    ledger.reconcile_date(1, "2023-12-31", [AbsenceEntry(date="", code="V")])

    assert ledger.absence_years() == [2023, 2024]


def test_load_assigns_fresh_ids_to_missing_and_duplicate_ids():
    ledger = AbsenceLedger([Employee(4, "Ann"), Employee(0, "Ben"), Employee(4, "Cy")])

    assert [(e.name, e.employee_id) for e in ledger.employees()] == [("Ann", 4), ("Ben", 5), ("Cy", 6)]
    assert ledger.add_employee("Dee").employee_id == 7
