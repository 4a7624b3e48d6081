"""Load recipes from a spreadsheet published as CSV."""

from .config.loader import SourceConfig, load_source_config
from .models import (
    ConfigurationError,
    EmptyDocumentError,
    ErrorKind,
    FetchError,
    Recipe,
    RecipeLoadError,
    UnknownRetrievalError,
)
from .services.recipe_loader import fetch_recipes_from_sheet

__all__ = [
    "fetch_recipes_from_sheet",
    "load_source_config",
    "SourceConfig",
    "Recipe",
    "ErrorKind",
    "RecipeLoadError",
    "ConfigurationError",
    "FetchError",
    "EmptyDocumentError",
    "UnknownRetrievalError",
]

__version__ = "0.1.0"
