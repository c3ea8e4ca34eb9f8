"""Logging setup for the ``igdb`` logger hierarchy."""
import logging

LOG_FORMAT = '[%(levelname)s] %(name)s: %(message)s'


def setup_logging(level: str = 'WARNING') -> logging.Logger:
    """Attach a stderr handler to the ``igdb`` logger and set its level.

    Client, service and config loggers (``igdb.client``,
    ``igdb.service.<Name>``, ``igdb.config``) all propagate here, so one call
    controls the whole package.  Calling it again only changes the level.
    Unknown level names fall back to WARNING.
    """
    logger = logging.getLogger('igdb')
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(getattr(logging, str(level).upper(), logging.WARNING))
    return logger
