from __future__ import annotations

import logging

from ..codes.repository import CodeRepository
from ..employees.repository import EmployeeRepository
from .service import AbsenceLedger

logger = logging.getLogger(__name__)


class LedgerPersistenceService:
    """Use case: load the ledger at startup and save it on demand.

    Errors are not retried: :class:`LoadError` is fatal to startup and
    :class:`SaveError` is reported to the user while the in-memory ledger
    stays as it was.
    """

    def __init__(self, employees: EmployeeRepository, codes: CodeRepository):
        self._employees = employees
        self._codes = codes

    def load_into(self, ledger: AbsenceLedger) -> None:
        employees = self._employees.load_all()
        codes = self._codes.load_all()
        ledger.load_initial_state(employees, codes)

    def save_employees(self, ledger: AbsenceLedger) -> None:
        self._employees.save_all(ledger.employees())

    def save_codes(self, ledger: AbsenceLedger) -> None:
        self._codes.save_all(ledger.codes())

    def save(self, ledger: AbsenceLedger) -> None:
        self.save_employees(ledger)
        self.save_codes(ledger)
        logger.info("Ledger saved")

    def raw_employees(self) -> str:
        return self._employees.read_raw()

    def raw_codes(self) -> str:
        return self._codes.read_raw()
