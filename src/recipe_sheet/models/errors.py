from __future__ import annotations

from enum import Enum

"""Error kinds raised while retrieving recipes from the published sheet.

The loader only ever surfaces one of the four classes below. Anything else
raised underneath (network failure, parser crash) is wrapped into
UnknownRetrievalError at the loader boundary.
"""

__all__ = [
    "ErrorKind",
    "RecipeLoadError",
    "ConfigurationError",
    "FetchError",
    "EmptyDocumentError",
    "UnknownRetrievalError",
]

BODY_SNIPPET_LIMIT = 200


class ErrorKind(str, Enum):
    CONFIGURATION = "CONFIGURATION"
    FETCH = "FETCH"
    EMPTY_DOCUMENT = "EMPTY_DOCUMENT"
    UNKNOWN = "UNKNOWN"


class RecipeLoadError(Exception):
    """Base class for every failure surfaced by the recipe loader."""

    kind: ErrorKind = ErrorKind.UNKNOWN


class ConfigurationError(RecipeLoadError):
    """Source URL missing, or not a valid absolute URL after cleanup."""

    kind = ErrorKind.CONFIGURATION


class FetchError(RecipeLoadError):
    """Non-success HTTP status while downloading the CSV document."""

    kind = ErrorKind.FETCH

    def __init__(self, status_code: int, reason: str = "", body: str = "") -> None:
        self.status_code = status_code
        self.reason = reason
        self.body_snippet = body[:BODY_SNIPPET_LIMIT]
        message = f"CSV download failed: HTTP {status_code}"
        if reason:
            message += f" - {reason}"
        super().__init__(message)


class EmptyDocumentError(RecipeLoadError):
    kind = ErrorKind.EMPTY_DOCUMENT

    def __init__(self, message: str = "downloaded CSV document is empty") -> None:
        super().__init__(message)


class UnknownRetrievalError(RecipeLoadError):
    kind = ErrorKind.UNKNOWN

    def __init__(self, message: str = "unknown failure during recipe retrieval") -> None:
        super().__init__(message)
