"""
Root logger configuration.

``setup_logging`` attaches a single console handler to the root logger
the first time it is called; later calls (tests, repeated app creation)
leave the existing handlers alone.
"""

import logging


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger with a console handler.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    """
    logger = logging.getLogger()
    if logger.handlers:
        return

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(handler)
