"""
Breakpoint data models.

A breakpoint value is either a numeric pixel width or an inert value that never
takes part in width comparisons. Raw configuration mappings keep their plain
values; `classify` turns each one into the matching variant when a decision
depends on it.
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Union


# Pixel widths used when no breakpoints are configured
DEFAULT_BREAKPOINTS: dict[str, int] = {
    "extraSmall": 480,
    "small": 768,
    "medium": 992,
    "large": 1200,
}


@dataclass(frozen=True)
class Numeric:
    """Breakpoint with a pixel width (possibly unbounded)."""
    width: float

    @property
    def is_bounded(self) -> bool:
        """False for the synthetic "wider than everything" breakpoint."""
        return not math.isinf(self.width)


@dataclass(frozen=True)
class Inert:
    """Breakpoint whose value is not a width (custom query string, flag, ...)."""
    value: Any


Breakpoint = Union[Numeric, Inert]


def classify(value: Any) -> Breakpoint:
    """
    Classify a raw breakpoint value.

    Booleans are not widths even though Python treats them as ints, and NaN
    cannot be ordered, so both are inert.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return Inert(value)
    if math.isnan(value):
        return Inert(value)
    return Numeric(value)


def with_infinity(
    breakpoints: Optional[Mapping[str, Any]],
    infinity: str = "infinity"
) -> dict[str, Any]:
    """
    Build the breakpoint mapping a reducer works with.

    Args:
        breakpoints: Configured breakpoints, or None for the defaults
        infinity: Name of the synthetic unbounded breakpoint

    Returns:
        New dict in declaration order with the infinity entry set to
        positive infinity (appended unless already declared). The input
        mapping is left untouched. An empty mapping stays empty apart from
        the infinity entry.
    """
    source = DEFAULT_BREAKPOINTS if breakpoints is None else breakpoints
    augmented = dict(source)
    augmented[infinity] = math.inf
    return augmented
