import logging

from . import configure_logging as _configure_logging_module


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Ensures logging is configured (lazy init if needed, though explicit config preferred at app entry).
    """
    if not _configure_logging_module._CONFIGURED:
        _configure_logging_module.configure_logging()

    return logging.getLogger(f"sir.{name}")
