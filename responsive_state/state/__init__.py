"""
Responsive state derivation module.

Resolves the current media type and orientation through a media query
evaluator and derives the comparison maps that make up the responsive state.
"""

from .comparisons import greater_than, is_, less_than
from .reducer import ResponsiveStateReducer, create_responsive_state_reducer, merge_extra_fields
from .resolvers import query_matches, resolve_media_type, resolve_orientation

__all__ = [
    "less_than",
    "greater_than",
    "is_",
    "query_matches",
    "resolve_media_type",
    "resolve_orientation",
    "ResponsiveStateReducer",
    "create_responsive_state_reducer",
    "merge_extra_fields",
]
