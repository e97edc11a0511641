#!/usr/bin/env python3
"""
Basic Usage Example - Responsive State Reducer

This script demonstrates the basic usage of the responsive state reducer
with simulated viewport sizes. It shows how to:
- Create a reducer from breakpoint widths
- Dispatch recalculation actions with a media query evaluator
- Read the media type and comparison maps

Run: python examples/basic_usage.py
"""

from responsive_state import ViewportMatcher, calculate_responsive_state, create_responsive_state_reducer
from responsive_state.logging import configure_logging

VIEWPORTS = [
    (375, 667),     # phone, portrait
    (768, 1024),    # tablet, portrait
    (1024, 768),    # tablet, landscape
    (1440, 900),    # laptop
]


def describe(state: dict) -> str:
    wider_than = [name for name, flag in state["greaterThan"].items() if flag]
    return (
        f"{state['mediaType']:<10} orientation={state['orientation']!s:<9} "
        f"greater than: {', '.join(wider_than) or '-'}"
    )


def main() -> None:
    configure_logging(level="WARNING")

    reducer = create_responsive_state_reducer(
        extra_fields=lambda state: {"isMobile": not state["greaterThan"]["small"]},
    )

    state = reducer(None, {"type": "@@INIT"})
    print(f"{'no viewport':<12} {describe(state)}")

    for width, height in VIEWPORTS:
        state = reducer(state, calculate_responsive_state(ViewportMatcher(width, height)))
        print(f"{width}x{height:<7} {describe(state)} mobile={state['isMobile']}")


if __name__ == "__main__":
    main()
