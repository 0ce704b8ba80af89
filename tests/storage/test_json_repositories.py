from __future__ import annotations

import json

import pytest

from absence_tracker.codes.json_code_repository import JsonCodeRepository
from absence_tracker.codes.model import AbsenceCode
from absence_tracker.core.exceptions import LoadError, SaveError
from absence_tracker.employees.json_employee_repository import JsonEmployeeRepository
from absence_tracker.employees.model import AbsenceEntry, Employee


def _write(path, payload):
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_load_employees_maps_wire_fields(tmp_path):
    path = _write(
        tmp_path / "employees.json",
        [
            {
                "employeeId": 1,
                "name": "Alice",
                "active": True,
                "absences": [
                    {"date": "2024-03-05", "code": "T", "minutes": "120", "comment": "Dentist"},
                    {"date": "2024-03-06", "code": "V", "minutes": "", "comment": ""},
                ],
            }
        ],
    )

    employees = JsonEmployeeRepository(path).load_all()

    assert employees == [
        Employee(
            employee_id=1,
            name="Alice",
            active=True,
            absences=(
                AbsenceEntry(date="2024-03-05", code="T", minutes=120, comment="Dentist"),
                AbsenceEntry(date="2024-03-06", code="V"),
            ),
        )
    ]


def test_load_tolerates_missing_fields(tmp_path):
    path = _write(tmp_path / "employees.json", [{"employeeId": "7"}, {"name": "NoId", "absences": [{}]}])

    employees = JsonEmployeeRepository(path).load_all()

    assert employees[0] == Employee(employee_id=7, name="", active=True, absences=())
    assert employees[1].employee_id == 0
    assert employees[1].absences == (AbsenceEntry(date="", code=""),)


def test_load_missing_file_fails(tmp_path):
    with pytest.raises(LoadError):
        JsonEmployeeRepository(tmp_path / "missing.json").load_all()


def test_load_invalid_json_fails(tmp_path):
    path = tmp_path / "codes.json"
    path.write_text("[{not json", encoding="utf-8")

    with pytest.raises(LoadError):
        JsonCodeRepository(path).load_all()


def test_load_non_array_document_fails(tmp_path):
    path = _write(tmp_path / "codes.json", {"code": "V"})

    with pytest.raises(LoadError):
        JsonCodeRepository(path).load_all()


def test_save_employees_pretty_prints_with_two_spaces(tmp_path):
    path = tmp_path / "employees.json"
    repo = JsonEmployeeRepository(path)

    repo.save_all([Employee(1, "Alice", True, (AbsenceEntry(date="2024-03-05", code="V"),))])

    text = path.read_text(encoding="utf-8")
    assert text.startswith('[\n  {\n    "employeeId": 1,')
    assert json.loads(text) == [
        {"employeeId": 1, "name": "Alice", "active": True, "absences": [{"date": "2024-03-05", "code": "V"}]}
    ]
    assert not (tmp_path / "employees.json.tmp").exists()


def test_save_overwrites_whole_document(tmp_path):
    path = _write(tmp_path / "codes.json", [{"code": "OLD", "value": "Old"}, {"code": "X", "value": "X"}])
    repo = JsonCodeRepository(path)

    repo.save_all([AbsenceCode("V", "Vacation")])

    assert json.loads(path.read_text(encoding="utf-8")) == [{"code": "V", "value": "Vacation"}]


def test_save_failure_raises_save_error(tmp_path):
    target = tmp_path / "codes.json"
    target.mkdir()

    with pytest.raises(SaveError):
        JsonCodeRepository(target).save_all([AbsenceCode("V", "Vacation")])


def test_read_raw_returns_document_text(tmp_path):
    path = tmp_path / "codes.json"
    path.write_text('[{"code": "V", "value": "Vacation"}]', encoding="utf-8")

    assert JsonCodeRepository(path).read_raw() == '[{"code": "V", "value": "Vacation"}]'


def test_load_keeps_whole_number_float_minutes(tmp_path):
    path = _write(
        tmp_path / "employees.json",
        [{"employeeId": 1, "name": "Alice", "absences": [{"date": "2024-03-05", "code": "T", "minutes": 120.0}]}],
    )
    repo = JsonEmployeeRepository(path)

    employees = repo.load_all()
    repo.save_all(employees)

    assert employees[0].absences[0].minutes == 120
    assert json.loads(path.read_text(encoding="utf-8"))[0]["absences"][0]["minutes"] == 120
