import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "cyrcipher"


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """
    Attach a Rich console handler on stderr to the package logger.

    Calling it again only updates the level, so repeated CLI invocations
    in one process do not stack handlers.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            show_time=True,
            rich_tracebacks=True,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)

    return logger
