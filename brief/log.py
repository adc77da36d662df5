"""Logging setup for the brief CLI.

stdout carries the summary, so every log record goes to stderr (and,
optionally, to a log file).  ``setup_logging`` is called once from
``cli.main()``; other modules use ``logging.getLogger(__name__)`` and let
records propagate to the ``"brief"`` package logger.

The console and the log file are levelled separately: ``--quiet`` and
``--verbose`` only change what reaches the terminal, while a log file always
keeps the full DEBUG trace of the run.
"""

import logging
import sys
from pathlib import Path

_CONSOLE_FMT = "%(levelname)-7s %(message)s"
_FILE_FMT = "%(asctime)s  %(levelname)-7s %(name)s: %(message)s"
_DATE = "%Y-%m-%d %H:%M:%S"


def _console_level(verbose: bool, quiet: bool) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def setup_logging(
    verbose: bool = False,
    log_file: Path | None = None,
    quiet: bool = False,
) -> None:
    """Configure the ``brief`` logger for a CLI session.

    Args:
        verbose:  Show DEBUG records (sentence counts, rejected requests) on
                  stderr.  Takes precedence over ``quiet``.
        quiet:    Show only warnings and errors on stderr.
        log_file: Also write every record, DEBUG included, to this path.
                  Parent directories are created automatically.

    Safe to call repeatedly: existing handlers are closed and replaced.
    """
    logger = logging.getLogger("brief")
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)
    logger.propagate = False

    console_level = _console_level(verbose, quiet)
    logger.setLevel(logging.DEBUG if log_file is not None else console_level)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(_CONSOLE_FMT))
    logger.addHandler(console)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(logging.Formatter(_FILE_FMT, datefmt=_DATE))
        logger.addHandler(fh)
