from __future__ import annotations

from dataclasses import dataclass

from ..codes.model import AbsenceCode


@dataclass(frozen=True)
class GridCell:
    date: str
    text: str
    comments: str = ""


@dataclass(frozen=True)
class GridRow:
    """Read-model: one employee row of the month absence table."""

    employee_id: int
    name: str
    cells: tuple[GridCell, ...]


@dataclass(frozen=True)
class SummaryRow:
    """Read-model: per-code monthly counts of one employee (same order as ``MonthReport.codes``)."""

    employee_id: int
    name: str
    counts: tuple[int, ...]


@dataclass(frozen=True)
class TallyRow:
    """Read-model: per-day counts of one absence code over all active employees."""

    code: str
    value: str
    counts: tuple[int, ...]


@dataclass(frozen=True)
class MonthReport:
    year: int
    month: int
    month_name: str
    days: tuple[str, ...]
    codes: tuple[AbsenceCode, ...]
    grid: tuple[GridRow, ...]
    summary: tuple[SummaryRow, ...]
    tally: tuple[TallyRow, ...]
