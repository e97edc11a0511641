"""
Error classifications for the responsive state package.

The reducer itself never raises its own errors: missing configuration and a
missing evaluator resolve to defaults, and evaluator failures propagate to the
caller unchanged. These exceptions cover the configuration layer.
"""

from .configuration import ConfigurationError, ResponsiveStateError

__all__ = [
    "ResponsiveStateError",
    "ConfigurationError",
]
