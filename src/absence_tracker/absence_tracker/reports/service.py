from __future__ import annotations

from typing import Sequence, Union

from ..common.datetime_utils import MonthLike, date_string, days_array, month_name, normalize_month, normalize_year
from ..core.constants import CELL_CODE_SEPARATOR, CELL_COMMENT_SEPARATOR
from ..employees.model import AbsenceEntry, Employee
from ..ledger.service import AbsenceLedger, count_code_in_month
from .model import GridCell, GridRow, MonthReport, SummaryRow, TallyRow


def cell_text(entries: Sequence[AbsenceEntry]) -> str:
    return CELL_CODE_SEPARATOR.join(a.display_code for a in entries)


def cell_comments(entries: Sequence[AbsenceEntry]) -> str:
    return CELL_COMMENT_SEPARATOR.join(a.comment for a in entries if a.comment)


def grid_row(employee: Employee, year: int, month: int, days: Sequence[str]) -> GridRow:
    cells = []
    for day in days:
        d = date_string(year, month, day)
        entries = [a for a in employee.absences if a.date == d]
        cells.append(GridCell(date=d, text=cell_text(entries), comments=cell_comments(entries)))
    return GridRow(employee_id=employee.employee_id, name=employee.name, cells=tuple(cells))


class MonthReportService:
    """Builds the three month views (absence grid, summary, daily tally).

    Nothing is cached; every call recomputes from the ledger's current state.
    """

    def __init__(self, ledger: AbsenceLedger):
        self._ledger = ledger

    def build_month_report(self, *, month: MonthLike, year: Union[int, str]) -> MonthReport:
        month_i = normalize_month(month)
        year_i = normalize_year(year)
        days = days_array(month_i, year_i)
        codes = self._ledger.codes()
        active = self._ledger.active_employees()

        grid = [grid_row(e, year_i, month_i, days) for e in active]

        summary = [
            SummaryRow(
                employee_id=e.employee_id,
                name=e.name,
                counts=tuple(count_code_in_month(e, c.code, year_i, month_i) for c in codes),
            )
            for e in active
        ]

        tally = [
            TallyRow(
                code=c.code,
                value=c.value,
                counts=tuple(self._ledger.daily_tally(c.code, date_string(year_i, month_i, day)) for day in days),
            )
            for c in codes
        ]

        return MonthReport(
            year=year_i,
            month=month_i,
            month_name=month_name(month_i),
            days=tuple(days),
            codes=tuple(codes),
            grid=tuple(grid),
            summary=tuple(summary),
            tally=tuple(tally),
        )
