"""
Logging Configuration
Sets up the loggers of the lsf2d / lsf3d packages.

The libraries only create module loggers; nothing is configured on import.
Applications (or an interactive session) call :func:`setup_logging` once.
"""
import logging
import sys
from typing import Optional

NAMESPACES = ("lsf3d", "lsf2d")


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Configures the package loggers.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
    """
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    # One set of handlers shared by every namespace
    handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    for name in NAMESPACES:
        logger = logging.getLogger(name)
        logger.setLevel(level)

        # Avoid duplicate records when called twice
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

        for handler in handlers:
            logger.addHandler(handler)

    logging.getLogger("lsf3d").info("Logging initialized.")
