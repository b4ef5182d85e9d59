"""
Logging configuration
"""

import logging
import sys


def setupLogging(level: str = "INFO") -> None:
    """Set up logging configuration."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)]
    )


def getLogger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger("fountainpager.%s" % name)
