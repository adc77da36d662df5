"""Tests for brief/log.py — console and log-file levels."""

import logging

import pytest

from brief.log import setup_logging


def _console_handler():
    logger = logging.getLogger("brief")
    (handler,) = [h for h in logger.handlers if type(h) is logging.StreamHandler]
    return handler


# ---------------------------------------------------------------------------
# Console levels  (logger state reset handled by conftest._reset_brief_logger)
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "verbose,quiet,expected",
    [
        (False, False, logging.INFO),
        (True, False, logging.DEBUG),
        (False, True, logging.WARNING),
        (True, True, logging.DEBUG),
    ],
)
def test_console_level(verbose, quiet, expected):
    setup_logging(verbose=verbose, quiet=quiet)
    assert _console_handler().level == expected
    assert logging.getLogger("brief").level == expected


def test_quiet_hides_info_but_keeps_errors(capsys):
    setup_logging(quiet=True)
    logging.getLogger("brief.pipeline").info("routine-progress")
    logging.getLogger("brief.cli").error("user-facing-error")
    err = capsys.readouterr().err
    assert "routine-progress" not in err
    assert "ERROR   user-facing-error" in err


def test_console_never_writes_to_stdout(capsys):
    setup_logging(verbose=True)
    logging.getLogger("brief.extractive").debug("sentinel-message")
    captured = capsys.readouterr()
    assert "sentinel-message" in captured.err
    assert captured.out == ""


def test_repeated_setup_replaces_handlers(tmp_path):
    setup_logging(log_file=tmp_path / "a.log")
    setup_logging()
    logger = logging.getLogger("brief")
    assert len(logger.handlers) == 1
    assert not any(isinstance(h, logging.FileHandler) for h in logger.handlers)


# ---------------------------------------------------------------------------
# Log file
# ---------------------------------------------------------------------------


def test_log_file_parent_dirs_created(tmp_path):
    log_file = tmp_path / "deep" / "nested" / "run.log"
    setup_logging(log_file=log_file)
    assert log_file.exists()


def test_log_file_records_debug_even_when_quiet(tmp_path, capsys):
    log_file = tmp_path / "run.log"
    setup_logging(quiet=True, log_file=log_file)
    logging.getLogger("brief.extractive").debug("selected-sentences")

    content = log_file.read_text(encoding="utf-8")
    assert "brief.extractive: selected-sentences" in content
    assert "selected-sentences" not in capsys.readouterr().err
