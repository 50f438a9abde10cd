"""
Centralized Logging Configuration for Ulpan

Provides consistent logging setup across the application with:
- Human-readable format for development
- Structured JSON-ish format when requested
- File rotation for log management
"""

import os
import logging
import logging.handlers
from typing import Optional


def setup_logging(
    app=None,
    log_level: str = 'INFO',
    log_dir: Optional[str] = None,
    json_format: bool = False
) -> logging.Logger:
    """
    Configure the ``ulpan`` logger hierarchy.

    Args:
        app: Flask application instance (optional)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_dir: Directory for log files; no file handler when omitted
        json_format: Use JSON format for structured logging

    Returns:
        Configured logger instance
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    logger = logging.getLogger('ulpan_app')
    logger.setLevel(level)
    logger.handlers.clear()

    if json_format:
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "module": "%(module)s", "message": "%(message)s"}'
    else:
        format_str = '%(asctime)s [%(levelname)s] %(module)s: %(message)s'

    formatter = logging.Formatter(format_str, datefmt='%Y-%m-%d %H:%M:%S')

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        log_file = os.path.join(log_dir, 'ulpan.log')
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=5 * 1024 * 1024,  # 5 MB
            backupCount=3,
            encoding='utf-8'
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if app:
        werkzeug_logger = logging.getLogger('werkzeug')
        werkzeug_logger.setLevel(logging.WARNING)

    logger.info("Logging initialized: level=%s, dir=%s", log_level, log_dir or '<console only>')

    return logger

