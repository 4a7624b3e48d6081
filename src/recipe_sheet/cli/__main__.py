from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from ..config.loader import SourceConfig, load_source_config
from ..fetch.http import fetch_csv_text
from ..logging.init import setup_logging
from ..models.errors import ConfigurationError, RecipeLoadError
from ..services.recipe_loader import fetch_recipes_from_sheet
from ..sheet.reader import missing_columns, read_csv_text

"""CLI entrypoint.

- Load .env (python-dotenv) and the optional YAML config
- Fetch the sheet and print the recipes as a JSON array (stdout or --output)
- --inspect-data prints headers, missing headers and the first rows instead
"""

EXIT_SUCCESS = 0
EXIT_CONFIG_ERROR = 1
EXIT_RETRIEVAL_ERROR = 2

INSPECT_SAMPLE_ROWS = 3


def _load_env_file(path: Path, override: bool = True) -> None:
    """Load a .env file; values override the process environment."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=override)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Published recipe sheet (CSV) loader")
    p.add_argument("--config", type=Path, default=None, help="Optional YAML config file")
    p.add_argument("--env-file", type=Path, default=Path(".env"), help="dotenv file to load (default: .env)")
    p.add_argument("--output", type=Path, default=None, help="Write the JSON array here instead of stdout")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--inspect-data", action="store_true", help="Print sheet headers & first rows then exit")
    return p.parse_args(argv)


def _inspect_data(cfg: SourceConfig) -> int:
    text = fetch_csv_text(cfg.csv_url, timeout=cfg.timeout, extra_headers=cfg.extra_headers)
    sheet = read_csv_text(text)
    print(f"COLUMNS: {sheet.columns}")
    print(f"MISSING: {missing_columns(sheet.columns, cfg.columns.expected_columns)}")
    print(f"ROWS: {len(sheet.rows)}")
    for row in sheet.rows[:INSPECT_SAMPLE_ROWS]:
        print(f"  row {row.row_number}: {json.dumps(row.values, ensure_ascii=False)}")
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # None のときのみシステム引数を読む (テストで main([]) を呼ぶため)
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)

    if args.debug:
        for h in logger.handlers:
            h.setLevel(logging.DEBUG)
        logger.setLevel(logging.DEBUG)
        logger.debug("debug mode enabled")

    _load_env_file(args.env_file, override=True)

    try:
        cfg = load_source_config(config_path=args.config)
    except ConfigurationError as e:
        logger.error(f"config: {e}")
        return EXIT_CONFIG_ERROR

    try:
        if args.inspect_data:
            return _inspect_data(cfg)
        recipes = fetch_recipes_from_sheet(cfg)
    except RecipeLoadError as e:
        logger.error(f"{e.kind.value.lower()}: {e}")
        return EXIT_RETRIEVAL_ERROR
    except Exception as e:  # --inspect-data は loader を経由しないため
        logger.error(f"unknown: {e}")
        return EXIT_RETRIEVAL_ERROR

    payload = json.dumps([r.to_dict() for r in recipes], ensure_ascii=False, indent=2)
    if args.output is not None:
        args.output.write_text(payload + "\n", encoding="utf-8")
        logger.info(f"wrote {len(recipes)} recipes to {args.output}")
    else:
        print(payload)
    return EXIT_SUCCESS


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
