"""
Configuration module.

Default breakpoints and reducer options, a YAML loader with layered
precedence, and validation of loaded values.
"""

from .defaults import DefaultConfig, ReducerDefaults, get_default_config
from .loader import ConfigLoader
from .validation import ConfigValidator, ValidationError

__all__ = [
    "DefaultConfig",
    "ReducerDefaults",
    "get_default_config",
    "ConfigLoader",
    "ConfigValidator",
    "ValidationError",
]
