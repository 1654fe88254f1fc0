"""
Utility Helper Functions for toolbelt

Environment detection and logging setup used by the facade.
Python 3.9+ compatible.
"""

import logging
import sys
from typing import Optional


def is_cli() -> bool:
    """
    Determine if the process is running from a command line.

    Returns:
        True if standard input is an open, readable stream
    """
    stdin = sys.stdin
    if stdin is None or getattr(stdin, "closed", False):
        return False

    try:
        return bool(stdin.readable())
    except (AttributeError, OSError, ValueError):
        return False


def setup_logging(log_level: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    """
    Setup logging configuration for toolbelt.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional log file path

    Returns:
        Configured logger
    """
    # Convert string level to logging constant
    numeric_level = getattr(logging, str(log_level).upper(), logging.INFO)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    return root_logger
