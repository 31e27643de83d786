"""
Logging Utilities Module
-----------------------
Provides helpers for setting up and managing logging.
"""
import logging

TOOLBOX_LOGGER_NAME = 'PEIRSLogger'


def setup_logging(log_level: str = 'INFO') -> logging.Logger:
    """
    Sets up and returns the toolbox logger with the specified log level.
    Unknown level names fall back to INFO.
    """
    logger = logging.getLogger(TOOLBOX_LOGGER_NAME)
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    logger.info("LoggingUtils: Logger setup complete.")
    return logger


def default_logger() -> logging.Logger:
    """Logger used by the module-level convenience functions. Never configured here."""
    return logging.getLogger('peirs_toolbox')
