"""
Breakpoint ordering.

Ranks breakpoints so that wider breakpoints compare greater than narrower ones
(large > medium > small). Numeric widths always rank before inert values.
"""

from collections.abc import Iterator, Mapping
from typing import Any

from .models import Numeric, classify


class OrderMap(Mapping[str, int]):
    """
    Read-only mapping of breakpoint name to its 0-based rank.

    Behaves like a plain ``dict`` of ranks (and compares equal to one) but also
    remembers which entries carry a numeric width, so comparison maps can
    report inert entries as non-matching.
    """

    def __init__(self, ranks: Mapping[str, int], numeric: frozenset[str]) -> None:
        self._ranks = dict(ranks)
        self._numeric = numeric

    def __getitem__(self, name: str) -> int:
        return self._ranks[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._ranks)

    def __len__(self) -> int:
        return len(self._ranks)

    def __repr__(self) -> str:
        return f"OrderMap({self._ranks!r})"

    def is_numeric(self, name: str) -> bool:
        """Whether the named breakpoint has a numeric width."""
        return name in self._numeric


def _sort_key(value: Any) -> tuple:
    variant = classify(value)
    if isinstance(variant, Numeric):
        return (0, variant.width)
    # Inert values have no natural order; compare their text form
    return (1, str(variant.value))


def compute_order(breakpoints: Mapping[str, Any]) -> OrderMap:
    """
    Compute the rank of every breakpoint.

    Args:
        breakpoints: Mapping of breakpoint name to width or inert value

    Returns:
        OrderMap keyed in declaration order. Ties on equal values keep
        declaration order, so the first declared entry gets the lower rank.
    """
    names = list(breakpoints)
    ordered = sorted(names, key=lambda name: _sort_key(breakpoints[name]))
    position = {name: index for index, name in enumerate(ordered)}

    numeric = frozenset(
        name for name in names if isinstance(classify(breakpoints[name]), Numeric)
    )
    return OrderMap({name: position[name] for name in names}, numeric)
