from __future__ import annotations

import json

import pytest

from absence_tracker.container import build_container
from absence_tracker.main import create_app


@pytest.fixture
def data_files(tmp_path):
    employees = tmp_path / "AbsenceTracker.json"
    codes = tmp_path / "AbsenceCodes.json"
    employees.write_text(
        json.dumps(
            [
                {
                    "employeeId": 1,
                    "name": "Alice",
                    "active": True,
                    "absences": [
                        {"date": "2024-03-05", "code": "V"},
                        {"date": "2024-03-05", "code": "T", "minutes": 120, "comment": "Dentist"},
                    ],
                },
                {
                    "employeeId": 2,
                    "name": "Bob",
                    "active": False,
                    "absences": [{"date": "2024-03-05", "code": "V"}],
                },
            ]
        ),
        encoding="utf-8",
    )
    codes.write_text(
        json.dumps([{"code": "V", "value": "Vacation"}, {"code": "T", "value": "Time Off"}]),
        encoding="utf-8",
    )
    return {"employees_file": str(employees), "codes_file": str(codes)}


@pytest.fixture
def container(data_files):
    return build_container(data_config=data_files)


@pytest.fixture
def client(container):
    app = create_app(settings_module="config.testing", container=container)
    return app.test_client()
