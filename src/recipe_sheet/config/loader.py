from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any
import re

import jsonschema
import requests
import yaml
from jsonschema.exceptions import ValidationError
from urllib3.exceptions import LocationParseError
from urllib3.util import parse_url

from ..models.config_models import ColumnMapping
from ..models.errors import ConfigurationError

"""Source configuration for the recipe sheet loader.

Responsibilities:
- Read the CSV URL from SHEET_RECIPES_CSV_URL (environment wins)
- Optionally load a YAML file (timeout, extra headers, column overrides)
  and validate it with jsonschema
- Clean up the "SHEET_RECIPES_CSV_URL=https://..." paste mistake
- Reject anything that is not an absolute URL before any network access
"""

__all__ = [
    "ENV_VAR",
    "SOURCE_CONFIG_SCHEMA",
    "SourceConfig",
    "load_source_config",
    "resolve_source_url",
]

logger = logging.getLogger(__name__)

ENV_VAR = "SHEET_RECIPES_CSV_URL"

SOURCE_CONFIG_SCHEMA: dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "source_url": {"type": "string", "minLength": 1},
        "timeout_sec": {"type": "number", "exclusiveMinimum": 0},
        "headers": {
            "type": "object",
            "additionalProperties": {"type": "string"},
        },
        "columns": {
            "type": "object",
            "additionalProperties": {"type": "string", "minLength": 1},
        },
        "id_column": {"type": "string", "minLength": 1},
    },
}


@dataclass(frozen=True)
class SourceConfig:
    csv_url: str
    timeout: float | None = None  # None: transport default (no explicit timeout)
    extra_headers: dict[str, str] = field(default_factory=dict)
    columns: ColumnMapping = field(default_factory=ColumnMapping)


# host as requests prepares it (IDNA-encoded, percent-quoted): reg-name chars without %, or [IPv6]
_HOST_RE = re.compile(r"^(?:[A-Za-z0-9._~!$&'()*+,;=-]+|\[[0-9A-Fa-f:.]+\])$")


def _is_absolute_url(url: str) -> bool:
    """Same parsing as requests (PreparedRequest + urllib3), plus a host charset check."""
    try:
        prepared = requests.PreparedRequest()
        prepared.prepare_url(url, None)
        parts = parse_url(prepared.url or url)
    except (requests.exceptions.RequestException, LocationParseError, ValueError):
        return False
    if not parts.scheme or not parts.host:
        return False
    return bool(_HOST_RE.match(parts.host))


def resolve_source_url(raw: str | None, env_var: str = ENV_VAR) -> str:
    """Validate the configured URL, stripping a leading ``KEY=`` if present.

    Raises:
        ConfigurationError: value missing/blank, or not an absolute URL
            (scheme and host) after cleanup.
    """
    url = (raw or "").strip()
    if not url:
        logger.error(f"{env_var} is not set")
        raise ConfigurationError(f"{env_var} is not defined. Check your .env file")

    prefix = f"{env_var}="
    if url.startswith(prefix):
        url = url[len(prefix):].strip()
        logger.warning("configured URL contained the variable name, cleaned up")

    if not _is_absolute_url(url):
        logger.error(f"invalid URL: {url}")
        raise ConfigurationError(f'invalid URL for {env_var}: "{url}". Check your .env file')
    return url


def _validate_config_schema(data: Any) -> None:
    try:
        jsonschema.validate(data, SOURCE_CONFIG_SCHEMA)
    except ValidationError as e:
        raise ConfigurationError(f"config validation failed: {e.message}") from e


def _read_config_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise ConfigurationError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"invalid yaml: {e}") from e
    _validate_config_schema(data)
    return data


def load_source_config(
    env: Mapping[str, str] | None = None,
    config_path: Path | None = None,
) -> SourceConfig:
    """Build a SourceConfig from the environment and an optional YAML file.

    Args:
        env: Environment mapping (defaults to ``os.environ``)
        config_path: Optional YAML file; only the keys of SOURCE_CONFIG_SCHEMA are allowed

    Raises:
        ConfigurationError: missing/invalid URL, unreadable or invalid config file,
            or a column override naming an unknown Recipe field.
    """
    if env is None:
        env = os.environ
    data: dict[str, Any] = _read_config_file(config_path) if config_path is not None else {}

    raw_url = (env.get(ENV_VAR) or "").strip() or data.get("source_url")
    url = resolve_source_url(raw_url)

    try:
        columns = ColumnMapping().with_overrides(data.get("columns"), data.get("id_column"))
    except KeyError as e:
        raise ConfigurationError(f"config validation failed: {e.args[0]}") from e

    timeout = data.get("timeout_sec")
    return SourceConfig(
        csv_url=url,
        timeout=float(timeout) if timeout is not None else None,
        extra_headers=dict(data.get("headers") or {}),
        columns=columns,
    )
