"""
Logging Middleware
Request/response logging
"""

import logging
from logging.handlers import RotatingFileHandler
import os
from flask.logging import default_handler
from config import Config

# Handlers installed by the last setup_logging() call
_installed_handlers = []


def build_handlers():
    """Create the file and console handlers from Config"""
    level = getattr(logging, Config.LOG_LEVEL, logging.INFO)
    handlers = []

    if Config.LOG_FILE:
        log_dir = os.path.dirname(Config.LOG_FILE)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        # File handler with UTF-8 encoding
        file_handler = RotatingFileHandler(
            Config.LOG_FILE,
            maxBytes=Config.LOG_MAX_BYTES,
            backupCount=Config.LOG_BACKUP_COUNT,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.INFO)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        ))
        handlers.append(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(levelname)s - %(message)s'
    ))
    handlers.append(console_handler)

    return handlers


def setup_logging(app):
    """Setup logging configuration"""
    level = getattr(logging, Config.LOG_LEVEL, logging.INFO)

    # Re-running replaces the previous handlers instead of stacking them
    for handler in _installed_handlers:
        logging.root.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    handlers = build_handlers()

    # App logger propagates to root
    app.logger.removeHandler(default_handler)
    app.logger.setLevel(level)

    # Configure root logger
    logging.root.setLevel(level)
    for handler in handlers:
        logging.root.addHandler(handler)

    _installed_handlers.extend(handlers)
    return handlers
