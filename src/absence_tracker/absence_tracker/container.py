from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .codes.json_code_repository import JsonCodeRepository
from .employees.json_employee_repository import JsonEmployeeRepository
from .exports.service import ExportService
from .ledger.persistence import LedgerPersistenceService
from .ledger.service import AbsenceLedger
from .reports.service import MonthReportService


@dataclass(frozen=True)
class Container:
    employees_repo: JsonEmployeeRepository
    codes_repo: JsonCodeRepository

    ledger: AbsenceLedger
    persistence: LedgerPersistenceService
    report_service: MonthReportService
    export_service: ExportService


def build_container(*, data_config: dict) -> Container:
    """Wire repositories and services; loads both JSON documents (LoadError is fatal)."""

    employees_repo = JsonEmployeeRepository(Path(data_config["employees_file"]))
    codes_repo = JsonCodeRepository(Path(data_config["codes_file"]))

    ledger = AbsenceLedger()
    persistence = LedgerPersistenceService(employees_repo, codes_repo)
    persistence.load_into(ledger)

    report_service = MonthReportService(ledger)
    export_service = ExportService(ledger, report_service)

    return Container(
        employees_repo=employees_repo,
        codes_repo=codes_repo,
        ledger=ledger,
        persistence=persistence,
        report_service=report_service,
        export_service=export_service,
    )
