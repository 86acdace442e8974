"""Diagnostic log sink for pyfetch."""

import logging

LOGGER_NAME = "pyfetch"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def open_diagnostics(path: str, name: str = LOGGER_NAME) -> logging.Logger:
    """
    Return a logger writing to ``path`` in append mode.

    The log is best effort: if ``path`` is empty or cannot be opened the
    logger gets a NullHandler and the run carries on. The logger never
    propagates, so diagnostics stay off the terminal.
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    handler: logging.Handler
    if not path:
        handler = logging.NullHandler()
    else:
        try:
            handler = logging.FileHandler(path, mode="a", encoding="utf-8")
        except OSError:
            handler = logging.NullHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger


def close_diagnostics(logger: logging.Logger) -> None:
    """Flush, close and detach every handler of ``logger``."""
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
