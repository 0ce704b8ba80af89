from __future__ import annotations

import csv
import io
from typing import Iterable, Sequence

from ..core.constants import CSV_LINE_TERMINATOR


def write_csv(rows: Iterable[Sequence[object]]) -> str:
    r'''Serialize rows with every value double-quoted, quotes doubled, CRLF records.

    >>> write_csv([["a", 'say "hi"'], [1]])
    '"a","say ""hi"""\r\n"1"\r\n'
    '''
    out = io.StringIO()
    writer = csv.writer(out, quoting=csv.QUOTE_ALL, lineterminator=CSV_LINE_TERMINATOR)
    for row in rows:
        writer.writerow(["" if v is None else v for v in row])
    return out.getvalue()
