#!/usr/bin/env python3
"""
Logging configuration for the pixel engine
Provides consistent logging setup across all modules

Every module logs under the "pixel_engine" tree:

    pixel_engine.core.fill        flood fill (DEBUG: pixels changed)
    pixel_engine.core.mask        color masking (DEBUG: pixels masked)
    pixel_engine.core.compositor  sheet assembly (DEBUG: canvas size)
    pixel_engine.core.io          image decode/encode
    pixel_engine.core.tools       tool dispatch
    pixel_engine.core.settings    settings fallbacks (WARNING)
    pixel_engine.cli              command results (INFO) and failures (ERROR)
"""

import logging
import sys
from typing import Any, Optional

ROOT_LOGGER_NAME = "pixel_engine"
DEFAULT_LEVEL = "INFO"


def setup_logging(level: str = DEFAULT_LEVEL,
                  log_file: Optional[str] = None) -> logging.Logger:
    """
    Setup logging configuration for the pixel engine.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file to write logs to (defaults to console only)

    Returns:
        Configured logger instance
    """
    numeric_level = getattr(logging, level.upper(), None)
    unknown_level = not isinstance(numeric_level, int)
    if unknown_level:
        numeric_level = logging.INFO

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(numeric_level)

    # Clear any existing handlers
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(numeric_level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
        except OSError as e:
            logger.warning(f"Could not create log file {log_file}: {e}")

    # Prevent propagation to root logger
    logger.propagate = False

    if unknown_level:
        logger.warning(f"Unknown log level {level!r}, using INFO")

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Module name (e.g., 'core.fill')

    Returns:
        Logger instance
    """
    return logging.getLogger(f'{ROOT_LOGGER_NAME}.{name}')


def setup_logging_from_settings(settings: Any,
                                level: Optional[str] = None,
                                log_file: Optional[str] = None) -> logging.Logger:
    """
    Setup logging with the level stored in engine settings.

    Args:
        settings: SettingsManager providing the "log_level" key
        level: Explicit level that overrides the stored one
        log_file: Optional file to write logs to

    Returns:
        Configured logger instance
    """
    if level is None:
        level = settings.get_str("log_level")
    return setup_logging(level, log_file)
