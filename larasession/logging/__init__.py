"""
Logging Package
Structured logging with sensitive data filtering
"""
from larasession.logging.logger_config import (
    LoggerConfig,
    JSONFormatter,
    SensitiveDataFilter
)
import logging
from typing import Optional

__all__ = [
    'LoggerConfig',
    'JSONFormatter',
    'SensitiveDataFilter',
    'getLogger',
    'INFO',
    'DEBUG',
    'WARNING',
    'ERROR',
    'CRITICAL',
]

INFO = logging.INFO
DEBUG = logging.DEBUG
WARNING = logging.WARNING
ERROR = logging.ERROR
CRITICAL = logging.CRITICAL


def getLogger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance (drop-in replacement for logging.getLogger)

    Only allows logger names that are:
    - None (root logger)
    - Listed in logging.ALLOWED_LOGGERS config (e.g., 'session')
    - Module-based names (containing '.') like 'larasession.session.session'

    Example:
        from larasession.logging import getLogger
        logger = getLogger(__name__)
        logger.warning("Session already started", extra={'session_name': 'app'})
    """
    # Sanic's own loggers bypass the restriction
    if name and name.startswith('sanic.'):
        return logging.getLogger(name)

    if name is not None and '.' not in name:
        from larasession.support import Config
        allowed_names = Config.get('logging.ALLOWED_LOGGERS', [])

        if name not in allowed_names:
            # Force arbitrary names to use root logger
            name = None

    return logging.getLogger(name)
