"""
Responsive state actions.

The reducer recalculates only for `CALCULATE_RESPONSIVE_STATE`; callers decide
when to dispatch it (on resize, on orientation change, on a timer, ...).
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional

CALCULATE_RESPONSIVE_STATE = "CALCULATE_RESPONSIVE_STATE"


@dataclass(frozen=True)
class Action:
    """Event passed to the reducer."""
    type: str
    match_media: Optional[Callable[[str], Any]] = None


def calculate_responsive_state(match_media: Optional[Callable[[str], Any]] = None) -> dict[str, Any]:
    """Build the action that asks the reducer to recalculate."""
    return {"type": CALCULATE_RESPONSIVE_STATE, "matchMedia": match_media}
