"""Logging configuration shared by the CLI and the web app."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Install a single stream handler on the package logger."""
    logger = logging.getLogger("quest_lift")
    logger.setLevel(level)

    if not any(getattr(h, "_quest_lift", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._quest_lift = True
        logger.addHandler(handler)
