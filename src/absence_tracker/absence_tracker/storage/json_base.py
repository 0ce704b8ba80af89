from __future__ import annotations

import json
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, List, TextIO

from ..core.constants import JSON_INDENT
from ..core.exceptions import LoadError, SaveError


def read_json_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise LoadError(f"Cannot read {path}: {e}", path=path) from e


def read_json_array(path: Path) -> List[Dict[str, Any]]:
    """Read a whole JSON document that must be an array of objects.

    Fails fast: a missing file, invalid JSON or a non-array document raises
    :class:`LoadError` instead of defaulting to an empty collection.
    """

    text = read_json_text(path)
    try:
        doc = json.loads(text)
    except json.JSONDecodeError as e:
        raise LoadError(f"Invalid JSON in {path}: {e}", path=path) from e

    if not isinstance(doc, list):
        raise LoadError(f"Expected a JSON array in {path}, got {type(doc).__name__}", path=path)
    for i, row in enumerate(doc):
        if not isinstance(row, dict):
            raise LoadError(f"Item {i} in {path} is not a JSON object", path=path)
    return doc


@contextmanager
def atomic_writer(path: Path) -> Iterator[TextIO]:
    """Write to ``<path>.tmp`` and replace the target only when writing succeeded."""
    tmp = path.with_suffix(path.suffix + ".tmp")
    try:
        with tmp.open("w", encoding="utf-8", newline="\n") as f:
            yield f
        tmp.replace(path)
    except Exception:
        tmp.unlink(missing_ok=True)
        raise


def write_json_array(path: Path, rows: List[Dict[str, Any]]) -> None:
    """Overwrite ``path`` with ``rows`` as pretty-printed JSON (two-space indent)."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with atomic_writer(path) as f:
            json.dump(rows, f, indent=JSON_INDENT, ensure_ascii=False)
            f.write("\n")
    except OSError as e:
        raise SaveError(f"Cannot write {path}: {e}", path=path) from e
