from __future__ import annotations

from dataclasses import dataclass

"""RowData model for the recipe sheet loader.

RowData is one parsed CSV line, keyed by the exact header text of the
published sheet. row_number is the 1-based position among parsed data rows
(blank lines already skipped), before any filtering.
"""

__all__ = [
    "RowData",
]


@dataclass(frozen=True)
class RowData:
    """Header-keyed view of a single CSV data row."""
    row_number: int  # 1-based, 空行スキップ後・フィルタ前の位置
    values: dict[str, str | None]  # header text -> raw cell (None when the row was short)

    def get(self, header: str) -> str:
        """Return the trimmed cell for ``header``, or "" when absent."""
        raw = self.values.get(header)
        if raw is None:
            return ""
        return str(raw).strip()
