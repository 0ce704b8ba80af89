from __future__ import annotations

from typing import Protocol, Sequence

from .model import AbsenceCode


class CodeRepository(Protocol):
    def load_all(self) -> Sequence[AbsenceCode]:
        raise NotImplementedError

    def save_all(self, codes: Sequence[AbsenceCode]) -> None:
        raise NotImplementedError

    def read_raw(self) -> str:
        raise NotImplementedError
