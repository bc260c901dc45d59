"""Logging configuration module for Suntrack."""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from suntrack.config import LoggingConfig

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(
    config: Optional[LoggingConfig] = None,
    name: str = "suntrack",
) -> logging.Logger:
    """Set up and configure the application logger.

    Args:
        config: Logging configuration. If None, uses defaults.
        name: Logger name.

    Returns:
        Configured logger instance.
    """
    if config is None:
        config = LoggingConfig()

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, config.level))

    # Clear existing handlers
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    # Console handler on stderr so command output stays parseable
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(getattr(logging, config.level))
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # File handler (if configured)
    if config.file:
        try:
            log_path = Path(config.file)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = RotatingFileHandler(
                log_path,
                maxBytes=config.max_size_mb * 1024 * 1024,
                backupCount=config.backup_count,
                encoding="utf-8",
            )
            file_handler.setLevel(getattr(logging, config.level))
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
        except PermissionError:
            logger.warning(
                f"Cannot write to log file {config.file}, logging to console only"
            )
        except OSError as e:
            logger.warning(f"Error setting up file logging: {e}, logging to console only")

    return logger


def get_logger(name: str = "suntrack") -> logging.Logger:
    """Get a module logger under the package logger.

    If the package logger has not been configured yet, it gets a basic
    console handler at WARNING so library use stays quiet.

    Args:
        name: Logger name, usually ``__name__``.

    Returns:
        Logger instance.
    """
    package_logger = logging.getLogger(name.split(".")[0])
    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
        package_logger.setLevel(logging.WARNING)
    return logging.getLogger(name)
