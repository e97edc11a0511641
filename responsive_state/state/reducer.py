"""
Responsive state reducer.

`create_responsive_state_reducer` does the per-configuration work once
(breakpoints with the infinity entry, media queries, ordering) and returns a
reducer: ``(state, action) -> state``. The reducer recalculates on
`CALCULATE_RESPONSIVE_STATE` or when there is no state yet, and returns the
previous state object unchanged for every other action.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Optional

from ..actions import CALCULATE_RESPONSIVE_STATE
from ..breakpoints.models import with_infinity
from ..breakpoints.ordering import OrderMap, compute_order
from ..breakpoints.queries import build_media_queries
from ..logging.config import get_reducer_logger, log_recalculation
from .comparisons import greater_than, is_, less_than
from .resolvers import MatchMedia, resolve_media_type, resolve_orientation

logger = get_reducer_logger(__name__)

ResponsiveState = dict[str, Any]
ExtraFields = Callable[[ResponsiveState], Mapping[str, Any]]


def _no_extra_fields(state: ResponsiveState) -> dict[str, Any]:
    return {}


def merge_extra_fields(state: ResponsiveState, extra: Optional[Mapping[str, Any]]) -> ResponsiveState:
    """Merge extra fields over a computed state; extra fields win on collision."""
    merged = dict(state)
    if extra:
        merged.update(extra)
    return merged


def _read_action(action: Any) -> tuple[Any, Optional[MatchMedia]]:
    """Extract (type, evaluator) from a mapping or an `Action`-like object."""
    if isinstance(action, Mapping):
        match_media = action.get("matchMedia")
        if match_media is None:
            match_media = action.get("match_media")
        return action.get("type"), match_media
    return getattr(action, "type", None), getattr(action, "match_media", None)


@dataclass(frozen=True)
class ReducerConfig:
    """Everything a reducer needs, computed once per configuration."""
    breakpoints: Mapping[str, Any]
    media_queries: dict[str, str]
    order: OrderMap
    infinity: str = "infinity"
    initial_media_type: Optional[str] = None
    extra_fields: ExtraFields = _no_extra_fields

    @classmethod
    def build(
        cls,
        breakpoints: Optional[Mapping[str, Any]] = None,
        *,
        initial_media_type: Optional[str] = None,
        infinity: str = "infinity",
        extra_fields: Optional[ExtraFields] = None
    ) -> "ReducerConfig":
        """Create a ReducerConfig; the given breakpoints are not modified."""
        augmented = with_infinity(breakpoints, infinity)
        return cls(
            # Read-only so states cannot reach back into the shared config
            breakpoints=MappingProxyType(augmented),
            media_queries=build_media_queries(augmented),
            order=compute_order(augmented),
            infinity=infinity,
            initial_media_type=initial_media_type,
            extra_fields=extra_fields or _no_extra_fields,
        )


class ResponsiveStateReducer:
    """Stateless reducer over a fixed `ReducerConfig`."""

    def __init__(self, config: ReducerConfig) -> None:
        self.config = config
        self.logger = logger

    def __call__(self, state: Optional[ResponsiveState], action: Any) -> ResponsiveState:
        action_type, match_media = _read_action(action)

        if action_type != CALCULATE_RESPONSIVE_STATE and state is not None:
            return state

        return self.calculate(
            match_media,
            use_initial=not state,
            trigger=action_type if action_type == CALCULATE_RESPONSIVE_STATE else "init",
        )

    def calculate(
        self,
        match_media: Optional[MatchMedia],
        use_initial: bool = False,
        trigger: str = CALCULATE_RESPONSIVE_STATE
    ) -> ResponsiveState:
        """
        Build a fresh responsive state.

        Args:
            match_media: Media query evaluator, or None when there is no viewport
            use_initial: Use the configured initial media type, if any, instead
                of resolving one
            trigger: Recorded in the recalculation log entry

        Returns:
            New state dict; evaluator errors propagate unchanged
        """
        config = self.config

        if use_initial and config.initial_media_type:
            media_type = config.initial_media_type
        else:
            media_type = resolve_media_type(match_media, config.media_queries, config.infinity)

        orientation = resolve_orientation(match_media)

        responsive_state: ResponsiveState = {
            "_responsiveState": True,
            "lessThan": less_than(media_type, config.order),
            "greaterThan": greater_than(media_type, config.order),
            "is": is_(media_type, config.breakpoints),
            "mediaType": media_type,
            "orientation": orientation,
            "breakpoints": dict(config.breakpoints),
        }

        log_recalculation(
            self.logger,
            media_type=media_type,
            orientation=orientation,
            trigger=trigger,
            context={"has_viewport": match_media is not None},
        )

        return merge_extra_fields(responsive_state, config.extra_fields(responsive_state))


def create_responsive_state_reducer(
    breakpoints: Optional[Mapping[str, Any]] = None,
    *,
    initial_media_type: Optional[str] = None,
    infinity: str = "infinity",
    extra_fields: Optional[ExtraFields] = None
) -> ResponsiveStateReducer:
    """
    Create a responsive state reducer.

    Args:
        breakpoints: Breakpoint name to pixel width (or inert value);
            None uses the default breakpoints
        initial_media_type: Media type for the very first state, bypassing
            the evaluator
        infinity: Name of the synthetic breakpoint wider than all others
        extra_fields: Function of the computed state returning fields to
            merge over it

    Returns:
        Callable reducer ``(state, action) -> state``
    """
    config = ReducerConfig.build(
        breakpoints,
        initial_media_type=initial_media_type,
        infinity=infinity,
        extra_fields=extra_fields,
    )
    logger.debug(
        "Responsive state reducer created",
        breakpoints=list(config.breakpoints),
        infinity=infinity,
        initial_media_type=initial_media_type,
    )
    return ResponsiveStateReducer(config)
