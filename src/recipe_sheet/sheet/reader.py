from __future__ import annotations

import io
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

import pandas as pd

from ..models.row_data import RowData

"""CSV reader for the published recipe sheet.

- 1行目をヘッダ行として扱い、以降をデータ行 (header-keyed access)
- Every cell is read as text; pandas NA coercion is disabled so that "NA",
  "null" or "" stay exactly what the sheet contains
- Empty lines are skipped, whitespace-only lines stay rows; rows longer
  than the header are truncated and short rows yield None for the missing cells
"""

__all__ = [
    "SheetData",
    "missing_columns",
    "read_csv_text",
]

logger = logging.getLogger(__name__)

_READ_OPTIONS: dict[str, Any] = {
    "header": None,
    "dtype": str,
    "keep_default_na": False,
    "engine": "python",
}


@dataclass
class SheetData:
    columns: list[str]
    rows: list[RowData]


def _cell(val: Any) -> str | None:
    return None if pd.isna(val) else str(val)


def read_csv_text(text: str) -> SheetData:
    """Parse CSV text into header-keyed rows.

    Steps:
    1. Read the first non-blank line alone to learn the header width
    2. Read the whole document with that width, keeping blank lines
    3. Cut over-long rows to the header width, drop empty lines (all cells NA)
    4. Build one RowData per remaining row, numbered from 1
    """
    head = pd.read_csv(io.StringIO(text), nrows=1, skip_blank_lines=True, **_READ_OPTIONS)
    width = head.shape[1]

    def _truncate(bad_line: list[str]) -> list[str]:
        logger.warning(f"row has {len(bad_line)} cells for {width} columns, extra cells dropped")
        return bad_line[:width]

    # pandas の skip_blank_lines は空白のみの行も捨てるため、空行は自前で落とす
    df = pd.read_csv(
        io.StringIO(text),
        names=list(range(width)),
        skip_blank_lines=False,
        on_bad_lines=_truncate,
        **_READ_OPTIONS,
    )
    df = df.dropna(how="all")
    if df.empty:
        return SheetData(columns=[], rows=[])

    columns = [_cell(c) or "" for c in df.iloc[0].tolist()]
    rows: list[RowData] = []
    for position, raw in enumerate(df.iloc[1:].itertuples(index=False, name=None), start=1):
        values = {col: _cell(val) for col, val in zip(columns, raw, strict=False)}
        rows.append(RowData(row_number=position, values=values))
    return SheetData(columns=columns, rows=rows)


def missing_columns(columns: Iterable[str], expected: Iterable[str]) -> list[str]:
    """Expected headers absent from ``columns``, in expected order."""
    present = set(columns)
    return [c for c in expected if c not in present]
