"""
Logging helpers.
"""
import logging

ROOT_LOGGER_NAME = 'evalmetrics'

# Handlers and levels belong to the host application.
logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger under the package namespace.
    
    Args:
        name: Usually the calling module's __name__
    
    Returns:
        Logger instance
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + '.'):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
