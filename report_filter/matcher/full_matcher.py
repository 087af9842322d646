# report_filter/matcher/full_matcher.py

import re
from dataclasses import dataclass
from typing import Optional, Tuple

from report_filter.matcher.errors import InvalidPatternError


@dataclass(frozen=True)
class CaptureResult:
    """
    Immutable result of a full match.

    Attributes:
        groups: Group substrings, index 0 is the whole match; groups that did
            not participate are None
        span: Start and end offsets of the whole match, None when no capture
            was taken
        group_count: Number of capturing groups in the pattern
    """
    groups: Tuple[Optional[str], ...] = ()
    span: Optional[Tuple[int, int]] = None
    group_count: int = 0

    @property
    def captured(self) -> bool:
        return self.span is not None

    def group(self, index: int) -> Optional[str]:
        """
        Return the substring of group ``index``.

        Raises:
            IndexError: If ``index`` is outside 0..group_count or no capture
                was taken
        """
        if index < 0 or index >= len(self.groups):
            raise IndexError(f"No group {index}")
        return self.groups[index]


# Positive verdict without captures: blank patterns and exclude filters
UNCAPTURED = CaptureResult()


class FullMatcher:
    """
    Backtracking evaluator that extracts capturing groups.

    Only runs after the automaton stage accepted a text, so its cost is paid
    once per distinct positive text when the filter caches. Each call returns
    a fresh ``CaptureResult``; no matcher state is shared between calls.
    """

    def __init__(self, pattern: str):
        """
        Raises:
            InvalidPatternError: If ``re`` rejects the pattern
        """
        try:
            self._regex = re.compile(pattern)
        except re.error as e:
            raise InvalidPatternError(e.msg, pattern, engine="re", position=e.pos) from e
        self.pattern = pattern

    @property
    def group_count(self) -> int:
        return self._regex.groups

    def evaluate(self, text: str) -> Optional[CaptureResult]:
        """Match the whole of ``text`` and return its captures, or None."""
        match = self._regex.fullmatch(text)
        if match is None:
            return None
        return CaptureResult(
            groups=(match.group(0),) + match.groups(),
            span=match.span(),
            group_count=self._regex.groups,
        )

    def __repr__(self) -> str:
        return f"FullMatcher({self.pattern!r})"
