from __future__ import annotations

import pytest

from recipe_sheet.models.row_data import RowData


def test_row_data_creation():
    row = RowData(row_number=1, values={"Nom de la recette": "Tarte"})
    assert row.row_number == 1
    assert row.values == {"Nom de la recette": "Tarte"}


def test_row_data_get_trims():
    row = RowData(row_number=2, values={"Nom de la recette": "  Quiche \t"})
    assert row.get("Nom de la recette") == "Quiche"


def test_row_data_get_missing_header_returns_empty():
    row = RowData(row_number=1, values={})
    assert row.get("Calories (pour une portion)") == ""


def test_row_data_get_none_value_returns_empty():
    row = RowData(row_number=1, values={"image_url": None})
    assert row.get("image_url") == ""


def test_row_data_is_frozen():
    row = RowData(row_number=1, values={})
    with pytest.raises(Exception):
        row.row_number = 3  # type: ignore[misc]
