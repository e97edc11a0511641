"""
Media type and orientation resolution.

Both resolvers fold over their queries in order and let the last matching
query win. Without an evaluator (no viewport) they return their fallback.
"""

from collections.abc import Mapping
from typing import Any, Callable, Optional

MatchMedia = Callable[[str], Any]

ORIENTATION_QUERIES: dict[str, str] = {
    "portrait": "(orientation: portrait)",
    "landscape": "(orientation: landscape)",
}


def query_matches(match_media: MatchMedia, query: str) -> bool:
    """
    Evaluate one media query.

    The evaluator result must expose ``matches`` (attribute or mapping key);
    anything else fails here and propagates to the caller.
    """
    result = match_media(query)
    if isinstance(result, Mapping):
        return bool(result["matches"])
    return bool(result.matches)


def _last_match(match_media: MatchMedia, queries: Mapping[str, str], fallback: Any) -> Any:
    resolved = fallback
    for name, query in queries.items():
        if query_matches(match_media, query):
            resolved = name
    return resolved


def resolve_media_type(
    match_media: Optional[MatchMedia],
    queries: Mapping[str, str],
    fallback: str
) -> str:
    """
    Get the current media type.

    Args:
        match_media: Media query evaluator, or None when there is no viewport
        queries: Breakpoint name to media query, in declaration order
        fallback: Media type used when nothing matches or no evaluator exists

    Returns:
        Name of the last breakpoint whose query matches
    """
    if match_media is None:
        return fallback
    return _last_match(match_media, queries, fallback)


def resolve_orientation(match_media: Optional[MatchMedia]) -> Optional[str]:
    """Get the current orientation ("portrait", "landscape" or None)."""
    if match_media is None:
        return None
    return _last_match(match_media, ORIENTATION_QUERIES, None)
