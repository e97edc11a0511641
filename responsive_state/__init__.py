"""
Responsive State - breakpoint-aware layout state for state containers

Derives which named layout breakpoint the current viewport falls into, with
ordering comparisons (`lessThan`, `greaterThan`, `is`) and orientation, as a
pure reducer over `CALCULATE_RESPONSIVE_STATE` actions.
"""

from .actions import CALCULATE_RESPONSIVE_STATE, Action, calculate_responsive_state
from .breakpoints import DEFAULT_BREAKPOINTS, compute_order
from .state import create_responsive_state_reducer
from .viewport import ViewportMatcher

__version__ = "0.1.0"

__all__ = [
    "CALCULATE_RESPONSIVE_STATE",
    "Action",
    "calculate_responsive_state",
    "DEFAULT_BREAKPOINTS",
    "compute_order",
    "create_responsive_state_reducer",
    "ViewportMatcher",
]
