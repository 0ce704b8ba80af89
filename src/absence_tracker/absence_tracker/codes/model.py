from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AbsenceCode:
    """Absence code catalog entry, e.g. ``AbsenceCode("V", "Vacation")``."""

    code: str
    value: str
