"""Integration tests driving a reducer through a sequence of viewport changes."""

from typing import Any, Callable, Dict, List

from responsive_state import (
    CALCULATE_RESPONSIVE_STATE, ViewportMatcher, calculate_responsive_state,
    create_responsive_state_reducer
)


class MiniStore:
    """Minimal single-reducer store recording every distinct state."""

    def __init__(self, reducer: Callable[[Any, Any], Dict[str, Any]]) -> None:
        self.reducer = reducer
        self.state = reducer(None, {"type": "@@INIT"})
        self.history: List[Dict[str, Any]] = [self.state]

    def dispatch(self, action: Dict[str, Any]) -> None:
        next_state = self.reducer(self.state, action)
        if next_state is not self.state:
            self.history.append(next_state)
        self.state = next_state


class TestFullPipeline:
    """Test the reducer the way a state container uses it."""

    def test_resize_sequence(self):
        store = MiniStore(create_responsive_state_reducer())

        for width, height in [(360, 640), (800, 600), (1000, 700), (1920, 1080)]:
            store.dispatch(calculate_responsive_state(ViewportMatcher(width, height)))

        media_types = [state["mediaType"] for state in store.history]
        assert media_types == ["infinity", "extraSmall", "medium", "large", "infinity"]
        assert [state["orientation"] for state in store.history] == [
            None, "portrait", "landscape", "landscape", "landscape"
        ]

    def test_unrelated_actions_do_not_create_states(self):
        store = MiniStore(create_responsive_state_reducer())
        store.dispatch(calculate_responsive_state(ViewportMatcher(500, 800)))

        for action_type in ["todos/add", "todos/remove", "router/navigate"]:
            store.dispatch({"type": action_type})

        assert len(store.history) == 2
        assert store.state["mediaType"] == "small"

    def test_comparisons_for_medium_viewport(self):
        reducer = create_responsive_state_reducer()
        state = reducer(None, calculate_responsive_state(ViewportMatcher(900, 1200)))

        assert state["mediaType"] == "medium"
        assert state["is"] == {
            "extraSmall": False, "small": False, "medium": True, "large": False, "infinity": False
        }
        assert state["lessThan"] == {
            "extraSmall": False, "small": False, "medium": False, "large": True, "infinity": True
        }
        assert state["greaterThan"] == {
            "extraSmall": True, "small": True, "medium": False, "large": False, "infinity": False
        }

    def test_custom_query_breakpoint(self):
        reducer = create_responsive_state_reducer({"phone": 600, "tall": "(orientation: portrait)"})
        state = reducer(None, {
            "type": CALCULATE_RESPONSIVE_STATE,
            "matchMedia": ViewportMatcher(400, 900),
        })

        # "tall" is declared after "phone" and also matches
        assert state["mediaType"] == "tall"
        assert state["is"] == {"phone": False, "tall": False, "infinity": False}
        # Inert entries rank last, so the current rank is above every width
        assert state["greaterThan"] == {"phone": True, "tall": False, "infinity": True}
        assert state["lessThan"] == {"phone": False, "tall": False, "infinity": False}
