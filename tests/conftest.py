"""Pytest configuration and shared fixtures."""

from types import SimpleNamespace
from typing import Any, Callable, Dict, Iterable, List

import pytest


class RecordingMatchMedia:
    """Fake media query evaluator matching a fixed set of queries."""

    def __init__(self, matching: Iterable[str] = ()) -> None:
        self.matching = set(matching)
        self.calls: List[str] = []

    def __call__(self, query: str) -> SimpleNamespace:
        self.calls.append(query)
        return SimpleNamespace(media=query, matches=query in self.matching)


@pytest.fixture
def sample_breakpoints() -> Dict[str, Any]:
    """Two-tier breakpoint configuration."""
    return {"small": 768, "large": 1200}


@pytest.fixture
def make_match_media() -> Callable[..., RecordingMatchMedia]:
    """Factory for fake evaluators that match the given queries."""
    def factory(*matching: str) -> RecordingMatchMedia:
        return RecordingMatchMedia(matching)
    return factory
