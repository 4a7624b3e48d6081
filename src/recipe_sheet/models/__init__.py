"""Domain models for the recipe sheet loader.

Recipe is the output record, RowData the intermediate header-keyed row, and
ColumnMapping the fixed field -> header table used to read the sheet.
"""

from .config_models import ColumnMapping, DEFAULT_HEADERS, DEFAULT_ID_HEADER
from .errors import (
    ConfigurationError,
    EmptyDocumentError,
    ErrorKind,
    FetchError,
    RecipeLoadError,
    UnknownRetrievalError,
)
from .recipe import Recipe
from .row_data import RowData

__all__ = [
    # Output / intermediate models
    "Recipe",
    "RowData",
    # Column configuration
    "ColumnMapping",
    "DEFAULT_HEADERS",
    "DEFAULT_ID_HEADER",
    # Errors
    "ErrorKind",
    "RecipeLoadError",
    "ConfigurationError",
    "FetchError",
    "EmptyDocumentError",
    "UnknownRetrievalError",
]
