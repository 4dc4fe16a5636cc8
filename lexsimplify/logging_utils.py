"""
Logging configuration for the lexsimplify CLI and library.
"""

import logging
import sys
from typing import Optional, TextIO

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


def configure_logging(level: str = "INFO", stream: Optional[TextIO] = None) -> None:
    """
    Configure the root logger. Safe to call once per CLI invocation; any
    previous configuration is replaced.
    """
    numeric_level: int = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format=LOG_FORMAT,
        stream=stream or sys.stderr,
        force=True,
    )
    # numpy reports floating point problems through the warnings module
    logging.captureWarnings(True)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name or "lexsimplify")
