from __future__ import annotations

import io
from typing import Sequence

from PIL import Image, ImageDraw, ImageFont

from ..reports.model import MonthReport

MARGIN = 16
CELL_PAD = 4
TABLE_GAP = 24
BACKGROUND = "white"
INK = "black"
GRID = "#999999"
HEADER_FILL = "#e8eef4"


def _text_size(font, text: str) -> tuple[int, int]:
    left, top, right, bottom = font.getbbox(text or " ")
    return right - left, bottom - top


class _Table:
    def __init__(self, title: str, headers: Sequence[str], rows: Sequence[Sequence[object]], font):
        self.title = title
        self.headers = [str(h) for h in headers]
        self.rows = [[str(v) for v in r] for r in rows]
        self.font = font

        _, line_h = _text_size(font, "Ag|")
        self.row_h = line_h + 2 * CELL_PAD
        self.col_w = []
        for i, header in enumerate(self.headers):
            texts = [header] + [r[i] for r in self.rows if i < len(r)]
            self.col_w.append(max(_text_size(font, t)[0] for t in texts) + 2 * CELL_PAD)

    @property
    def width(self) -> int:
        return max(sum(self.col_w), _text_size(self.font, self.title)[0])

    @property
    def height(self) -> int:
        # title line + header + body
        return self.row_h * (2 + len(self.rows))

    def draw(self, draw: ImageDraw.ImageDraw, x0: int, y0: int) -> None:
        draw.text((x0, y0 + CELL_PAD), self.title, fill=INK, font=self.font)
        y = y0 + self.row_h
        for r_idx, row in enumerate([self.headers] + self.rows):
            x = x0
            for c_idx, w in enumerate(self.col_w):
                box = (x, y, x + w, y + self.row_h)
                draw.rectangle(box, outline=GRID, fill=HEADER_FILL if r_idx == 0 else None)
                if c_idx < len(row):
                    draw.text((x + CELL_PAD, y + CELL_PAD), row[c_idx], fill=INK, font=self.font)
                x += w
            y += self.row_h


def month_tables(report: MonthReport) -> list[tuple[str, list, list]]:
    """Title, header and body rows of the absence, summary and tally tables."""
    label = f"{report.month_name} {report.year}"
    return [
        (
            f"Absences - {label}",
            ["Employee", *report.days],
            [[row.name, *(c.text for c in row.cells)] for row in report.grid],
        ),
        (
            f"Absence Summary - {label}",
            ["Employee", *(c.value for c in report.codes)],
            [[row.name, *row.counts] for row in report.summary],
        ),
        (
            f"Daily Absence Tally - {label}",
            ["Code", *report.days],
            [[row.code, *row.counts] for row in report.tally],
        ),
    ]


def render_month_tables(report: MonthReport) -> bytes:
    """Render the absence, summary and tally tables of a month as one PNG."""
    font = ImageFont.load_default()
    tables = [_Table(title, headers, rows, font) for title, headers, rows in month_tables(report)]

    width = max(t.width for t in tables) + 2 * MARGIN
    height = sum(t.height for t in tables) + TABLE_GAP * (len(tables) - 1) + 2 * MARGIN

    img = Image.new("RGB", (width, height), BACKGROUND)
    draw = ImageDraw.Draw(img)
    y = MARGIN
    for t in tables:
        t.draw(draw, MARGIN, y)
        y += t.height + TABLE_GAP

    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()
