#
# PROJECT: wireframe-cube
# MODULE: wireframe_cube/logging_config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

"""
Logging Configuration
Sets up the package logger. Frames go to stdout, so logs never do.
"""
import logging
import sys
from typing import Optional


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None,
                  console: bool = True) -> None:
    """
    Configures the logger for the 'wireframe_cube' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
        console: Also log to stderr. Turned off while curses owns the screen.
    """
    logger = logging.getLogger("wireframe_cube")
    logger.setLevel(level)

    # Check if handlers already exist to avoid duplicate logs on re-init
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    logger.debug("Logging initialized.")
