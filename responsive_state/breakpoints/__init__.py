"""
Breakpoint configuration module.

Classifies raw breakpoint values, ranks them by width and derives the media
queries used to resolve the current media type.
"""

from .models import DEFAULT_BREAKPOINTS, Inert, Numeric, classify, with_infinity
from .ordering import OrderMap, compute_order
from .queries import build_media_queries

__all__ = [
    "DEFAULT_BREAKPOINTS",
    "Numeric",
    "Inert",
    "classify",
    "with_infinity",
    "OrderMap",
    "compute_order",
    "build_media_queries",
]
