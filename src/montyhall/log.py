"""Logger configuration."""

import logging

LOGGER_NAME = "montyhall"


def get_logger(level: int = logging.WARNING) -> logging.Logger:
    """Configure and return the package logger.

    Logs go to stderr so they never mix with the report on stdout.
    Calling again only changes the level.

    Args:
        level: Logging level for the logger and its handler

    Returns:
        The configured logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if getattr(logger, "_configured", False):
        for handler in logger.handlers:
            handler.setLevel(level)
        return logger

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s | %(levelname)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    logger.addHandler(handler)
    logger.propagate = False
    logger._configured = True  # type: ignore[attr-defined]
    return logger
