"""
Logging configuration for lintrun.

Records go through rich on the status console, the same console that
draws the progress bar, so a log line during a run prints above the bar
instead of tearing it. stdout is left to the report.
"""

import logging
import os
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

RUN_LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def log_level(verbose: bool = False, quiet: bool = False) -> int:
    """Level for the CLI flags; ``quiet`` wins over ``verbose``."""
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.DEBUG
    return logging.WARNING


def _run_log_handler(log_file: str) -> logging.Handler:
    directory = os.path.dirname(os.path.abspath(log_file))
    os.makedirs(directory, exist_ok=True)
    handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    handler.setFormatter(logging.Formatter(RUN_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    # the file keeps the full run trace whatever the console level
    handler.setLevel(logging.DEBUG)
    return handler


def setup_logging(
    verbose: bool = False,
    quiet: bool = False,
    log_file: Optional[str] = None,
    console: Optional[Console] = None,
) -> logging.Logger:
    """
    Configure the ``lintrun`` logger for one run.

    Args:
        verbose: Enable DEBUG level on the console
        quiet: Only show errors on the console
        log_file: Optional run log (the ``log_file`` setting); always DEBUG
        console: Console to log to; defaults to a fresh stderr console

    Returns:
        The configured ``lintrun`` logger
    """
    level = log_level(verbose, quiet)

    console_handler = RichHandler(
        console=console or Console(stderr=True),
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        markup=False,
        show_time=True,
        show_path=verbose,
    )
    console_handler.setLevel(level)
    handlers = [console_handler]

    if log_file:
        handlers.append(_run_log_handler(log_file))

    logging.basicConfig(format="%(message)s", datefmt="[%X]", handlers=handlers, force=True)

    logger = logging.getLogger("lintrun")
    logger.setLevel(logging.DEBUG if log_file else level)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger under the ``lintrun`` namespace (``"scanner"`` -> ``"lintrun.scanner"``)."""
    if name is None:
        return logging.getLogger("lintrun")

    if not name.startswith("lintrun"):
        name = f"lintrun.{name}"

    return logging.getLogger(name)
