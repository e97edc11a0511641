"""Tests for responsive state actions."""

from responsive_state.actions import CALCULATE_RESPONSIVE_STATE, Action, calculate_responsive_state


class TestActions:
    """Test action construction."""

    def test_action_type_constant(self):
        assert CALCULATE_RESPONSIVE_STATE == "CALCULATE_RESPONSIVE_STATE"

    def test_calculate_without_viewport(self):
        assert calculate_responsive_state() == {"type": CALCULATE_RESPONSIVE_STATE, "matchMedia": None}

    def test_calculate_with_evaluator(self):
        def match_media(query):
            return {"matches": False}

        action = calculate_responsive_state(match_media)
        assert action["matchMedia"] is match_media

    def test_action_defaults(self):
        action = Action(type=CALCULATE_RESPONSIVE_STATE)
        assert action.match_media is None
