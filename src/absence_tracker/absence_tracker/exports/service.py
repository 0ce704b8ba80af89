from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Optional, Union

from ..common.datetime_utils import MonthLike, try_parse_iso_date
from ..core.exceptions import ValidationError
from ..ledger.service import AbsenceLedger, EmployeeRef
from ..reports.service import MonthReportService
from .csv_writer import write_csv
from .image_writer import render_month_tables

EMPLOYEE_HISTORY_HEADERS = [
    "Employee Name",
    "Employee ID",
    "Active",
    "Absence Date",
    "Absence Code",
    "Minutes",
    "Comment",
]
SUMMARY_TITLE = "Absence Type Summary"
SUMMARY_HEADERS = ["Absence Code", "Count"]
TABLES_PNG_FILENAME = "absence_tables.png"


@dataclass(frozen=True)
class ExportFile:
    filename: str
    mimetype: str
    content: bytes


class ExportService:
    def __init__(self, ledger: AbsenceLedger, reports: MonthReportService):
        self._ledger = ledger
        self._reports = reports

    def employee_history_csv(
        self,
        employee: EmployeeRef,
        *,
        start: Optional[str] = None,
        end: Optional[str] = None,
    ) -> ExportFile:
        """One employee's absences (full history or an inclusive date range) plus a per-code count summary."""

        emp = self._ledger.find_employee(employee)
        if not emp:
            raise ValidationError("Employee not found")
        if bool(start) != bool(end):
            raise ValidationError("Both start and end dates are required for a date range")

        absences = list(emp.absences)
        if start and end:
            start_d = try_parse_iso_date(start)
            end_d = try_parse_iso_date(end)
            if not start_d or not end_d:
                raise ValidationError("Dates must use the YYYY-MM-DD format")
            in_range = []
            for a in absences:
                d = try_parse_iso_date(a.date)
                if d and start_d <= d <= end_d:
                    in_range.append(a)
            absences = in_range

        status = "Active" if emp.active else "Inactive"
        rows: list[list[object]] = [EMPLOYEE_HISTORY_HEADERS]
        for a in absences:
            rows.append([emp.name, emp.employee_id, status, a.date, a.code, a.minutes or "", a.comment or ""])
        if not absences:
            rows.append([emp.name, emp.employee_id, status, "", "", "", ""])

        summary = Counter(a.code for a in absences)
        rows += [[], [], [SUMMARY_TITLE], SUMMARY_HEADERS]
        rows += [[code, count] for code, count in summary.items()]

        suffix = "history" if not start else f"{start}_to_{end}"
        return ExportFile(
            filename=f"{emp.name}_{suffix}.csv",
            mimetype="text/csv",
            content=write_csv(rows).encode("utf-8"),
        )

    def month_csv(self, *, month: MonthLike, year: Union[int, str]) -> ExportFile:
        report = self._reports.build_month_report(month=month, year=year)
        rows: list[list[object]] = [["Employee Name", *report.days]]
        rows += [[row.name, *(c.text for c in row.cells)] for row in report.grid]
        return ExportFile(
            filename=f"absence_month_{report.month_name}_{report.year}.csv",
            mimetype="text/csv",
            content=write_csv(rows).encode("utf-8"),
        )

    def tables_png(self, *, month: MonthLike, year: Union[int, str]) -> ExportFile:
        report = self._reports.build_month_report(month=month, year=year)
        return ExportFile(filename=TABLES_PNG_FILENAME, mimetype="image/png", content=render_month_tables(report))
