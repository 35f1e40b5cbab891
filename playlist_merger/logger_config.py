import logging
import sys


def setup_logger(level: int = logging.INFO):
    """Configures the root logger for the application."""
    logger = logging.getLogger()
    logger.setLevel(level)

    # stdout carries the report, log records go to stderr
    handler = logging.StreamHandler(sys.stderr)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    handler.setFormatter(formatter)

    # Add the handler only once
    if not logger.handlers:
        logger.addHandler(handler)


# Configure on import
setup_logger()
