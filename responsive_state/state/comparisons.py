"""
Comparison maps derived from the current media type.

Each map has one boolean per breakpoint name. Breakpoints without a numeric
width are always False.
"""

from collections.abc import Mapping
from typing import Any

from ..breakpoints.models import Numeric, classify
from ..breakpoints.ordering import OrderMap


def less_than(current_media_type: str, order: OrderMap) -> dict[str, bool]:
    """
    Compute the `lessThan` map.

    An entry is True when the current media type ranks strictly below it.
    A current rank of 0 counts as missing, so the narrowest breakpoint yields
    an all-False map.
    """
    current_rank = order.get(current_media_type)

    result = {}
    for media_type, rank in order.items():
        if order.is_numeric(media_type) and current_rank:
            result[media_type] = current_rank < rank
        else:
            result[media_type] = False
    return result


def greater_than(current_media_type: str, order: OrderMap) -> dict[str, bool]:
    """
    Compute the `greaterThan` map.

    An entry is True when the current media type ranks strictly above it.
    An unknown current media type yields an all-False map.
    """
    current_rank = order.get(current_media_type)

    result = {}
    for media_type, rank in order.items():
        if order.is_numeric(media_type) and current_rank is not None:
            result[media_type] = current_rank > rank
        else:
            result[media_type] = False
    return result


def is_(current_media_type: str, breakpoints: Mapping[str, Any]) -> dict[str, bool]:
    """
    Compute the `is` map from the raw breakpoints.

    Only bounded, non-zero widths can match; the unbounded breakpoint and
    inert values are always False.
    """
    result = {}
    for media_type, value in breakpoints.items():
        variant = classify(value)
        if isinstance(variant, Numeric) and variant.is_bounded and variant.width:
            result[media_type] = media_type == current_media_type
        else:
            result[media_type] = False
    return result
