"""Configuration for spendbook.

Constants and environment-driven settings used throughout the application.
"""

import logging
import os
from pathlib import Path

VERSION = "0.1.0"

# Database configuration
DB_PATH_ENV_VAR = "SPENDBOOK_DB_PATH"
DEFAULT_DB_DIR = Path.home() / ".spendbook"
DEFAULT_DB_FILENAME = "spendbook.db"

# Settings store stand-in: the currency new expenses get when none is given
CURRENCY_ENV_VAR = "SPENDBOOK_CURRENCY"
DEFAULT_CURRENCY = os.getenv(CURRENCY_ENV_VAR, "USD").strip().upper() or "USD"

# Logging configuration
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")


def get_log_level() -> int:
    """Get the configured log level."""
    level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return level_map.get(LOG_LEVEL.upper(), logging.WARNING)


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging for command-line use."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else get_log_level(),
        format=LOG_FORMAT,
    )
