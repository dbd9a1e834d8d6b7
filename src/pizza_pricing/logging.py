import logging

from .config.settings import get_settings


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with a single stream handler attached.

    The level comes from settings (PIZZA_PRICING_LOG_LEVEL).
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(get_settings().log_level)
        # Records stop here, root handlers (e.g. uvicorn's) would print them again
        logger.propagate = False
    return logger
