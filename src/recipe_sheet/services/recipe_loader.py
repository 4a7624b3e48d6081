from __future__ import annotations

import logging
import math
from collections.abc import Iterable

import requests

from ..config.loader import SourceConfig, load_source_config
from ..fetch.http import fetch_csv_text
from ..logging.init import log_summary
from ..models.config_models import NAME_FIELD, ColumnMapping
from ..models.errors import RecipeLoadError, UnknownRetrievalError
from ..models.recipe import Recipe
from ..models.row_data import RowData
from ..sheet.reader import missing_columns, read_csv_text
from .summary import render_summary_line, tally_types

"""Recipe loading pipeline.

config -> URL check -> GET -> body check -> CSV parse -> column diagnostics
-> row filter/transform -> tally -> list[Recipe]

Either the full list is returned or a RecipeLoadError is raised; there is no
partial result and no retry.
"""

__all__ = [
    "build_recipe",
    "fetch_recipes_from_sheet",
    "parse_number",
    "rows_to_recipes",
]

logger = logging.getLogger(__name__)

PLACEHOLDER_ID_PREFIX = "R_"


def parse_number(text: str) -> int | float | None:
    """Parse an already trimmed cell; None when empty or not numeric."""
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return int(value) if value.is_integer() else value


def build_recipe(row: RowData, columns: ColumnMapping) -> Recipe | None:
    """Map one raw row to a Recipe, or None when the name cell is blank."""
    nom = row.get(columns.header_for(NAME_FIELD))
    if not nom:
        return None

    def text(field_name: str) -> str:
        return row.get(columns.header_for(field_name))

    temps = parse_number(text("temps_preparation_min"))
    personnes = parse_number(text("nb_personnes"))

    calories_raw = text("calories")
    calories = parse_number(calories_raw)
    if calories_raw and calories is None:
        logger.debug(f"row {row.row_number}: calories '{calories_raw}' is not numeric, left empty")

    return Recipe(
        id=row.get(columns.id_header) or f"{PLACEHOLDER_ID_PREFIX}{row.row_number}",
        type=text("type"),
        difficulte=text("difficulte"),
        temps_preparation_min=temps if temps is not None else 0,
        categorie_temps=text("categorie_temps"),
        nb_personnes=personnes if personnes is not None else 0,
        nom=nom,
        description_courte=text("description_courte"),
        ingredients=text("ingredients"),
        instructions=text("instructions"),
        equipements=text("equipements"),
        calories=calories,
        image_url=text("image_url"),
    )


def rows_to_recipes(rows: Iterable[RowData], columns: ColumnMapping | None = None) -> list[Recipe]:
    """Filter and transform rows in source order.

    Placeholder ids use RowData.row_number, i.e. the position before the
    name filter is applied.
    """
    if columns is None:
        columns = ColumnMapping()
    recipes: list[Recipe] = []
    for row in rows:
        recipe = build_recipe(row, columns)
        if recipe is not None:
            recipes.append(recipe)
    return recipes


def _load(config: SourceConfig, session: requests.Session | None) -> list[Recipe]:
    logger.info(f"fetching recipes from: {config.csv_url}")
    text = fetch_csv_text(
        config.csv_url,
        session=session,
        timeout=config.timeout,
        extra_headers=config.extra_headers,
    )

    sheet = read_csv_text(text)
    logger.info(f"available columns: {sheet.columns}")
    missing = missing_columns(sheet.columns, config.columns.expected_columns)
    if missing:
        logger.warning(f"missing columns: {missing}")

    recipes = rows_to_recipes(sheet.rows, config.columns)
    log_summary(render_summary_line(tally_types(recipes)))
    return recipes


def fetch_recipes_from_sheet(
    config: SourceConfig | None = None,
    *,
    session: requests.Session | None = None,
) -> list[Recipe]:
    """Fetch the published sheet and return its recipes.

    Args:
        config: Source configuration; read from the environment when omitted
        session: Optional requests session (one GET is issued per call)

    Raises:
        ConfigurationError: URL missing or invalid (raised before any request)
        FetchError: non-2xx HTTP status
        EmptyDocumentError: empty body
        UnknownRetrievalError: anything else (original exception chained)
    """
    try:
        if config is None:
            config = load_source_config()
        return _load(config, session)
    except RecipeLoadError:
        raise
    except Exception as e:
        logger.error(f"failed to retrieve recipes: {e}")
        raise UnknownRetrievalError(f"unknown failure during recipe retrieval: {e}") from e
