"""
Centralized error handling and logging for character generation.

This module provides:
- The package logger and an explicit setup for file/console handlers
- Custom exception types for the outer surfaces (loading, export)
- A helper for logging exceptions with context
"""
import logging
import traceback
from pathlib import Path
from typing import Optional
from datetime import datetime

# Package logger; handlers are only installed by setup_logging()
logger = logging.getLogger("chargen")
logger.addHandler(logging.NullHandler())


def setup_logging(log_dir: Optional[Path] = None, verbose: bool = False) -> logging.Logger:
    """
    Install file and console handlers on the package logger.

    Args:
        log_dir: Directory for the dated log file (no file handler if None)
        verbose: Show DEBUG trace output on the console too

    Returns:
        The configured package logger
    """
    logger.setLevel(logging.DEBUG)

    # Prevent duplicate handlers
    if any(not isinstance(h, logging.NullHandler) for h in logger.handlers):
        return logger

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f"chargen_{datetime.now().strftime('%Y%m%d')}.log"
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        )
        logger.addHandler(file_handler)

    # Console handler for warnings/errors
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console_handler.setFormatter(
        logging.Formatter('%(levelname)s: %(message)s')
    )
    logger.addHandler(console_handler)

    return logger


class CharacterGenError(Exception):
    """Base exception for character generation errors."""
    def __init__(self, message: str, user_message: Optional[str] = None):
        super().__init__(message)
        self.user_message = user_message or message


class TemplateError(CharacterGenError):
    """Character template asset could not be read or parsed."""
    pass


class ExportError(CharacterGenError):
    """Generated character could not be written out."""
    pass


def log_error(error: Exception, context: str = "") -> None:
    """
    Log an error with context information.

    Args:
        error: The exception that occurred
        context: Where the error occurred (e.g., "load_template", "export")
    """
    error_type = type(error).__name__
    error_msg = str(error)
    trace = traceback.format_exc()

    logger.error(f"Error in {context}: {error_type}: {error_msg}\n{trace}")
