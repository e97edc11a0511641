"""
Logging configuration and utilities for the responsive state package.
"""
from .config import configure_logging, get_logger, get_reducer_logger, log_recalculation

__all__ = ["configure_logging", "get_logger", "get_reducer_logger", "log_recalculation"]
