"""Logging configuration."""

import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Get configured logger.
    
    Args:
        name: Logger name
        level: Log level (None leaves the level to the root logger)
        
    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    
    if level is not None:
        if not logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
            logger.addHandler(handler)
        logger.setLevel(getattr(logging, level.upper()))
    
    return logger


def configure_logging(level: str = 'INFO', quiet: bool = False) -> None:
    """
    Configure root logging for command line use.

    Args:
        level: Log level name
        quiet: Only report errors
    """
    logging.basicConfig(
        level=logging.ERROR if quiet else getattr(logging, level.upper()),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT
    )
