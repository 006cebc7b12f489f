"""
Centralized Logging Configuration for WordBloom

Provides consistent logging setup across the application with:
- Human-readable format for development
- Optional JSON-ish format for log shipping
- File rotation for log management
"""

import os
import logging
import logging.handlers
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
JSON_LOG_FORMAT = '{"time": "%(asctime)s", "level": "%(levelname)s", "module": "%(module)s", "message": "%(message)s"}'


def setup_logging(
    app=None,
    log_level: str = 'INFO',
    log_dir: Optional[str] = None,
    json_format: bool = False
) -> logging.Logger:
    """
    Configure the ``wordbloom_app`` logger hierarchy.

    Args:
        app: Flask application instance (optional)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_dir: Directory for a rotating log file; console only when None
        json_format: Use JSON format for structured logging

    Returns:
        Configured logger instance
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    logger = logging.getLogger('wordbloom_app')
    logger.setLevel(level)
    logger.handlers.clear()

    formatter = logging.Formatter(
        JSON_LOG_FORMAT if json_format else LOG_FORMAT,
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            os.path.join(log_dir, 'wordbloom.log'),
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
        if app is not None:
            app.logger.addHandler(file_handler)

    if app is not None:
        logging.getLogger('werkzeug').setLevel(logging.WARNING)

    logger.info(f"Logging initialized: level={log_level}, dir={log_dir or '<console>'}")

    return logger


def get_logger(name: str = 'wordbloom_app') -> logging.Logger:
    """Get a logger by name."""
    return logging.getLogger(name)
