"""Data input helpers (CSV files and manual grid entry).

:mod:`column_loader` turns CSV text, files or a grid of strings into a
:class:`~fourierlab.dataio.column_loader.TableData` and extracts a cleaned
numeric column for the analysis pipeline. Nothing here touches the FFT.
"""

from .column_loader import (
    CsvFormatError,
    TableData,
    first_numeric_column,
    load_table,
    numeric_column,
    parse_csv_text,
    table_from_grid,
)

__all__ = [
    "CsvFormatError",
    "TableData",
    "first_numeric_column",
    "load_table",
    "numeric_column",
    "parse_csv_text",
    "table_from_grid",
]
