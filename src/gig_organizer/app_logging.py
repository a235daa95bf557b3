"""Logging configuration helpers."""

import logging

_PACKAGE_LOGGER = "gig_organizer"


def configure_logging(level: str = "INFO") -> None:
    """Attach one stream handler to the package logger.

    httpx logs every upstream call at INFO; it is capped at WARNING unless the
    dashboard itself runs at DEBUG.
    """
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO
    logger = logging.getLogger(_PACKAGE_LOGGER)
    logger.setLevel(resolved)
    logging.getLogger("httpx").setLevel(
        logging.DEBUG if resolved <= logging.DEBUG else logging.WARNING
    )
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s: %(name)s: %(message)s")
    )
    logger.addHandler(handler)
    logger.propagate = False
