import logging
import sys

LOGGER_NAME = "orbit_field"


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Attach a stdout handler to the ``orbit_field`` logger namespace."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # avoid duplicate output when called twice
    if logger.hasHandlers():
        logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    ))
    logger.addHandler(handler)
    return logger
