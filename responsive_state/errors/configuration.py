"""
Configuration error classifications.

Raised when breakpoint configuration loaded from a file cannot be turned into a
working reducer.
"""

from typing import Any, Dict, List, Optional


class ResponsiveStateError(Exception):
    """Base class for responsive state errors."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}


class ConfigurationError(ResponsiveStateError):
    """Breakpoint configuration is unreadable or fails validation."""

    def __init__(self, message: str, errors: Optional[List[Any]] = None,
                 source: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
        self.source = source
