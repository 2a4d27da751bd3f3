"""
Logging infrastructure.

Provides loggers for the infrastructure layer that work before the API
has configured the root logger (scripts, seed runs, test sessions).
"""
import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """
    Get logger instance.

    A stream handler is attached only when nothing upstream (the root
    logger included) will emit the records.

    Args:
        name: Logger name (usually module name)
        level: Level applied when the handler is attached

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)
    if not logger.handlers and not logging.getLogger().handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(level)
    return logger
