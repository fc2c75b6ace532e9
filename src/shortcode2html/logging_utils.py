"""Logging setup for the shortcode2html command line.

Library modules log through ``logging.getLogger(__name__)`` and never install
handlers. The CLI calls :func:`configure_logging` once per run. Rendered HTML
is written to stdout, so every diagnostic handler writes to stderr or a file.

"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PACKAGE_LOGGER_NAME = "shortcode2html"

TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
PLAIN_FORMAT = "%(levelname)s: %(message)s"


def resolve_log_level(log_level: int | str) -> int:
    """Translate a level name such as ``"debug"`` into its numeric value.

    Unknown names resolve to ``logging.INFO``.
    """
    if isinstance(log_level, int):
        return log_level
    return getattr(logging, str(log_level).upper(), logging.INFO)


def build_formatter(trace_mode: bool = False) -> logging.Formatter:
    """Return the formatter for plain or trace output.

    Trace output adds timestamps and the emitting module, which tells parser
    recovery messages apart from handler failures.
    """
    if trace_mode:
        return logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)
    return logging.Formatter(PLAIN_FORMAT)


def _add_file_handler(root_logger: logging.Logger, log_file: str, level: int, formatter: logging.Formatter) -> None:
    try:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    except OSError as exc:
        root_logger.warning("Could not create log file %s: %s", log_file, exc)
        return
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)
    root_logger.info("Logging to file: %s", log_file)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Install the CLI's logging handlers on the root logger.

    Existing root handlers are replaced, so calling this twice does not
    duplicate output.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or string name (e.g., "INFO").
    log_file : str, optional
        Also append log records to this file. A file that cannot be opened
        produces a warning on stderr instead of an error.
    trace_mode : bool, default False
        When true, emit timestamps and logger names for debugging traces.

    Returns
    -------
    logging.Logger
        The configured root logger instance.

    """
    resolved_level = resolve_log_level(log_level)
    formatter = build_formatter(trace_mode)

    root_logger = logging.getLogger()
    root_logger.setLevel(resolved_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(resolved_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        _add_file_handler(root_logger, log_file, resolved_level, formatter)

    logging.getLogger(PACKAGE_LOGGER_NAME).setLevel(resolved_level)
    return root_logger
