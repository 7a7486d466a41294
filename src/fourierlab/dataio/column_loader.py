"""Load tabular CSV data and extract numeric columns for the FFT."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

logger = logging.getLogger(__name__)


class CsvFormatError(ValueError):
    """Raised when CSV text or grid input cannot be turned into a table."""


@dataclass
class TableData:
    """Header names plus rows of raw string cells keyed by header."""

    headers: List[str]
    rows: List[Dict[str, str]] = field(default_factory=list)
    skipped_rows: int = 0

    def __len__(self) -> int:
        return len(self.rows)


def _parse_float(value: str | None) -> Optional[float]:
    if value is None:
        return None
    try:
        parsed = float(value)
    except ValueError:
        return None
    if math.isnan(parsed):
        return None
    return parsed


def _rows_to_table(
    headers: List[str],
    rows: Sequence[Tuple[int, Sequence[str]]],
    *,
    source: str,
) -> TableData:
    table = TableData(headers=headers)
    for line_no, cells in rows:
        if all(not c.strip() for c in cells):
            continue
        if len(cells) != len(headers):
            logger.warning(
                "%s row %d has %d values, expected %d; skipping",
                source,
                line_no,
                len(cells),
                len(headers),
            )
            table.skipped_rows += 1
            continue
        table.rows.append({h: c.strip() for h, c in zip(headers, cells)})
    return table


def parse_csv_text(text: str) -> TableData:
    """
    Parse comma-separated text whose first line is a header row.

    Cells are split on ``,`` (no quoting) and trimmed. Blank lines are
    ignored and rows with the wrong number of cells are skipped with a
    warning.
    """
    lines = text.strip().splitlines()
    if not lines or not lines[0].strip():
        raise CsvFormatError("CSV is empty")

    headers = [h.strip() for h in lines[0].split(",")]
    body = [(idx, line.split(",")) for idx, line in enumerate(lines[1:], start=2) if line.strip()]
    table = _rows_to_table(headers, body, source="CSV")
    if not table.rows and body:
        raise CsvFormatError("CSV has headers but every data row is malformed")
    return table


def load_table(path: Path) -> TableData:
    """Read a UTF-8 CSV file and parse it with :func:`parse_csv_text`."""
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        return parse_csv_text(f.read())


def table_from_grid(grid: Sequence[Sequence[str]], *, first_row_is_header: bool = True) -> TableData:
    """
    Build a table from manually entered grid cells.

    When ``first_row_is_header`` is False, headers are generated as
    ``column 1`` .. ``column n``.
    """
    if not grid or not grid[0]:
        raise CsvFormatError("grid is empty")

    if first_row_is_header:
        headers = [str(h).strip() for h in grid[0]]
        data_rows = grid[1:]
        first_line = 2
    else:
        headers = [f"column {i + 1}" for i in range(len(grid[0]))]
        data_rows = grid
        first_line = 1

    if any(not h for h in headers):
        raise CsvFormatError("headers must not be empty")
    if len(set(headers)) != len(headers):
        raise CsvFormatError("headers must be unique")

    body = [(idx, [str(c) for c in row]) for idx, row in enumerate(data_rows, start=first_line)]
    return _rows_to_table(headers, body, source="Grid")


def first_numeric_column(table: TableData) -> Optional[str]:
    """Return the first header whose first data cell is numeric."""
    if not table.headers:
        return None
    if table.rows:
        first = table.rows[0]
        for header in table.headers:
            if _parse_float(first.get(header)) is not None:
                return header
    return table.headers[0]


def numeric_column(table: TableData, name: str) -> np.ndarray:
    """
    Return the numeric values of column ``name`` as a float array.

    Cells that do not parse as numbers (or parse as NaN) are dropped, so the
    result may be shorter than the table.
    """
    if name not in table.headers:
        raise KeyError(f"unknown column {name!r}; available: {table.headers}")
    values = [_parse_float(row.get(name)) for row in table.rows]
    return np.array([v for v in values if v is not None], dtype=float)
