"""Root logger configuration for the CLI entry point."""

from __future__ import annotations

import logging
import os

from autorun.config import LOG_DIR, LOG_FILENAME, LOG_FORMAT


def file_logs_disabled() -> bool:
    """Return True when file logging is switched off for this process."""
    return bool(os.environ.get("DISABLE_FILE_LOGS") or os.environ.get("PYTEST_CURRENT_TEST"))


def configure_logging(level: str = "INFO", enable_file: bool = True) -> None:
    r"""Configure the root logger with a stderr handler and an optional file handler.

    Parameters
    ----------
    level : str, optional
        Logging level name, e.g. ``"DEBUG"`` or ``"INFO"``.
    enable_file : bool, optional
        Whether to also write to ``LOG_DIR / LOG_FILENAME``. Ignored when
        ``DISABLE_FILE_LOGS`` or ``PYTEST_CURRENT_TEST`` is set.

    Notes
    -----
    All existing root handlers are removed and replaced. The Textual app
    owns the terminal while running, so the stream handler only matters for
    the plain console mode and for startup errors.

    Examples
    --------
    >>> configure_logging("DEBUG", enable_file=False)
    >>> import logging; logging.getLogger("autorun").debug("message")
    """
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if enable_file and not file_logs_disabled():
        try:
            LOG_DIR.mkdir(exist_ok=True)
            handlers.insert(0, logging.FileHandler(LOG_DIR / LOG_FILENAME, mode="a"))
        except OSError:
            logging.getLogger(__name__).warning("Cannot open log file in %s", LOG_DIR)
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
    )


__all__ = ["configure_logging", "file_logs_disabled"]
