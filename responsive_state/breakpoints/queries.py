"""
Media query generation.

Turns numeric breakpoints into width-range media queries. Each breakpoint
covers the range from just above the next narrower breakpoint up to its own
width; the unbounded breakpoint has no upper limit.
"""

from collections.abc import Mapping
from typing import Any, Optional

from .models import Inert, Numeric, classify


def _px(width: float) -> str:
    if float(width).is_integer():
        return f"{int(width)}px"
    return f"{width:g}px"


def _range_query(width: float, lower: Optional[float], bounded: bool) -> str:
    features = []
    if lower is not None:
        features.append(f"(min-width: {_px(lower + 1)})")
    if bounded:
        features.append(f"(max-width: {_px(width)})")
    return " and ".join(["screen", *features])


def build_media_queries(breakpoints: Mapping[str, Any]) -> dict[str, str]:
    """
    Build one media query per breakpoint.

    Args:
        breakpoints: Mapping of breakpoint name to width or inert value

    Returns:
        Dict of breakpoint name to media query string, in declaration order.
        Inert string values are used verbatim as custom queries; other inert
        values get no query.
    """
    widths = sorted(
        variant.width
        for variant in map(classify, breakpoints.values())
        if isinstance(variant, Numeric)
    )

    queries: dict[str, str] = {}
    for name, value in breakpoints.items():
        variant = classify(value)
        if isinstance(variant, Inert):
            if isinstance(variant.value, str):
                queries[name] = variant.value
            continue

        narrower = [width for width in widths if width < variant.width]
        lower = narrower[-1] if narrower else None
        queries[name] = _range_query(variant.width, lower, variant.is_bounded)

    return queries
