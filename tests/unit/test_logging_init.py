from __future__ import annotations

import logging
from io import StringIO

import recipe_sheet.logging.init as log_init
from recipe_sheet.logging.init import (
    LOGGER_NAME,
    SUMMARY_LEVEL,
    LabeledFormatter,
    log_summary,
    reset_logging,
    setup_logging,
)


def test_setup_logging_creates_logger_with_labeled_formatter():
    logger = setup_logging()
    assert logger.name == LOGGER_NAME
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, LabeledFormatter)
    assert logger.propagate is False


def test_setup_logging_is_idempotent():
    first = setup_logging()
    second = setup_logging()
    assert first is second
    assert len(second.handlers) == 1


def test_labeled_prefixes_and_tag():
    captured = StringIO()
    logger = logging.getLogger("test_recipe_sheet_labels")
    logger.setLevel(logging.DEBUG)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logging.addLevelName(SUMMARY_LEVEL, "SUMMARY")
    handler = logging.StreamHandler(captured)
    handler.setFormatter(LabeledFormatter())
    logger.addHandler(handler)
    logger.propagate = False

    logger.info("Test info message")
    logger.warning("Test warning message")
    logger.error("Test error message")
    logger.log(SUMMARY_LEVEL, "recipes=1 sweet=1 savory=0")

    lines = captured.getvalue().strip().split("\n")
    assert lines == [
        "INFO [Recipes] Test info message",
        "WARN [Recipes] Test warning message",
        "ERROR [Recipes] Test error message",
        "SUMMARY [Recipes] recipes=1 sweet=1 savory=0",
    ]


def test_child_module_loggers_reach_package_handler(capsys):
    setup_logging()
    logging.getLogger("recipe_sheet.services.recipe_loader").warning("missing columns: ['x']")
    log_summary("recipes=0 sweet=0 savory=0")
    err = capsys.readouterr().err
    assert "WARN [Recipes] missing columns: ['x']" in err
    assert "SUMMARY [Recipes] recipes=0 sweet=0 savory=0" in err


def test_reset_logging_restores_propagation():
    setup_logging()
    reset_logging()
    logger = logging.getLogger(LOGGER_NAME)
    assert logger.handlers == []
    assert logger.propagate is True
    assert log_init._logger is None


def test_log_summary_does_not_configure_handlers(caplog):
    with caplog.at_level(SUMMARY_LEVEL):
        log_summary("recipes=2 sweet=1 savory=1")
    assert "recipes=2 sweet=1 savory=1" in caplog.text
    assert logging.getLogger(LOGGER_NAME).handlers == []
    assert log_init._logger is None
    assert not hasattr(log_init, "get_logger")
