from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Sequence

from ..storage.json_base import read_json_array, read_json_text, write_json_array
from .model import AbsenceCode
from .repository import CodeRepository

logger = logging.getLogger(__name__)


class JsonCodeRepository(CodeRepository):
    def __init__(self, path: Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load_all(self) -> List[AbsenceCode]:
        codes = [
            AbsenceCode(code=str(r.get("code") or ""), value=str(r.get("value") or ""))
            for r in read_json_array(self._path)
        ]
        logger.info("Loaded %d absence codes from %s", len(codes), self._path)
        return codes

    def save_all(self, codes: Sequence[AbsenceCode]) -> None:
        write_json_array(self._path, [{"code": c.code, "value": c.value} for c in codes])
        logger.info("Saved %d absence codes to %s", len(codes), self._path)

    def read_raw(self) -> str:
        return read_json_text(self._path)
