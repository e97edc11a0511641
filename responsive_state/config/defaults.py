"""Default configuration parameters for responsive state reducers."""

from dataclasses import dataclass, field
from typing import Optional

from ..breakpoints.models import DEFAULT_BREAKPOINTS


@dataclass(frozen=True)
class ReducerDefaults:
    """Reducer option defaults."""
    infinity: str = "infinity"                       # Name of the unbounded breakpoint
    initial_media_type: Optional[str] = None         # Media type for the first state


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    breakpoints: dict[str, float] = field(default_factory=lambda: dict(DEFAULT_BREAKPOINTS))
    options: ReducerDefaults = field(default_factory=ReducerDefaults)


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig()
