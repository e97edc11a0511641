"""
Media query evaluation against a known viewport size.

Python hosts have no browser `matchMedia`. `ViewportMatcher` plays that role
for a viewport whose size is known (terminal columns, a headless renderer's
window, a test fixture), understanding the queries the breakpoint builder
produces plus orientation queries.
"""

import re
from dataclasses import dataclass
from typing import Optional

_FEATURE_RE = re.compile(r"^\(\s*([a-z-]+)\s*:\s*([^)]+?)\s*\)$")
_LENGTH_RE = re.compile(r"^(\d+(?:\.\d+)?)(px)?$")


@dataclass(frozen=True)
class MediaQueryResult:
    """Outcome of evaluating one media query."""
    media: str
    matches: bool


def _parse_length(raw: str) -> Optional[float]:
    match = _LENGTH_RE.match(raw)
    if not match:
        return None
    return float(match.group(1))


@dataclass(frozen=True)
class ViewportMatcher:
    """
    Callable media query evaluator for a fixed viewport.

    Orientation is portrait when height >= width; without a height,
    orientation features never match.
    """
    width: float
    height: Optional[float] = None

    def __call__(self, query: str) -> MediaQueryResult:
        return MediaQueryResult(media=query, matches=self.matches(query))

    @property
    def orientation(self) -> Optional[str]:
        if self.height is None:
            return None
        return "portrait" if self.height >= self.width else "landscape"

    def matches(self, query: str) -> bool:
        """Whether any comma-separated part of the query matches."""
        return any(self._matches_part(part) for part in query.split(","))

    def _matches_part(self, part: str) -> bool:
        terms = [term.strip() for term in re.split(r"\band\b", part.strip().lower())]
        if not terms or not all(terms):
            return False
        return all(self._matches_term(term) for term in terms)

    def _matches_term(self, term: str) -> bool:
        if term in ("screen", "all"):
            return True

        feature = _FEATURE_RE.match(term)
        if not feature:
            # Unknown media types (print, speech, ...) never match
            return False

        name, value = feature.groups()
        if name == "orientation":
            return value == self.orientation

        length = _parse_length(value)
        if length is None:
            return False
        if name == "min-width":
            return self.width >= length
        if name == "max-width":
            return self.width <= length
        return False
