"""
Pattern-based request filter.

A request filter decides whether a recorded request belongs to a merge rule
and, when it does, hands back the state needed to derive a label from a
capturing group. Matching runs in two stages:

1. the RE2 automaton answers accept/reject for the whole subject text
2. only when the filter applies and captures may be needed, the backtracking
   ``re`` matcher extracts the groups

Outcomes are memoized per subject text in a bounded LRU cache, so a text that
was classified before costs one dictionary lookup.

Each filter instance, together with its cache, belongs to one worker. Use
``clone()`` to get an identically configured filter for another worker.
"""

import copy
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from report_filter.config.filter_config import DEFAULT_CACHE_SIZE
from report_filter.matcher.automaton import AutomatonTable, get_automaton_table
from report_filter.matcher.errors import CaptureGroupOutOfRange, CaptureUnavailableError
from report_filter.matcher.full_matcher import UNCAPTURED, CaptureResult, FullMatcher
from report_filter.utils.logging_config import get_logger
from report_filter.utils.result_cache import MatchOutcome, ResultCache

# Module logger
logger = get_logger(__name__)

# Group index meaning "no replacement, use the full subject text"
NO_REPLACEMENT = -1


class RequestFilter(ABC):
    """
    Base class for request filters that classify requests by pattern.

    Attributes:
        type_code: Merge-rule type code of this filter
    """

    def __init__(self, type_code: str, regex: Optional[str], exclude: bool = False,
                 cache_size: int = DEFAULT_CACHE_SIZE,
                 automaton_table: Optional[AutomatonTable] = None):
        """
        Args:
            type_code: The type code of this request filter
            regex: Pattern identifying matching requests; blank matches everything
            exclude: Whether this is an exclusion rule
            cache_size: Capacity of the result cache, 0 disables caching
            automaton_table: Table to take compiled automata from, defaults to
                the process-wide table

        Raises:
            InvalidPatternError: If either matching engine rejects the pattern
            ValueError: If cache_size is negative
        """
        if cache_size < 0:
            raise ValueError(f"cache_size must be >= 0, got {cache_size}")

        self.type_code = type_code
        self._exclude = bool(exclude)

        if regex is None or not regex.strip():
            self._full_matcher = None
            self._automaton = None
            if self._exclude:
                logger.debug("Exclude filter '%s' has a blank pattern and matches every request", type_code)
        else:
            # compile with re first: its errors carry a position
            self._full_matcher = FullMatcher(regex)
            table = automaton_table if automaton_table is not None else get_automaton_table()
            self._automaton = table.get_or_compile(regex)

        self._cache = ResultCache(cache_size) if cache_size > 0 else None

        logger.debug("Created request filter %s (cache_size=%d)", self, cache_size)

    @abstractmethod
    def get_text(self, record: Any) -> str:
        """Return the text to examine from the passed record."""
        pass

    def applies_to(self, record: Any) -> Optional[CaptureResult]:
        """
        Check whether this filter applies to ``record``.

        Returns:
            The match state to hand to ``get_replacement_text`` if the filter
            applies, otherwise None. Filters with a blank pattern apply to
            every record, exclude flag or not.
        """
        if self._automaton is None:
            return UNCAPTURED

        text = self.get_text(record)

        if self._cache is None:
            outcome = self._evaluate(text)
        else:
            outcome = self._cache.get(text)
            if outcome is None:
                outcome = self._evaluate(text)
                self._cache.put(text, outcome)

        return outcome.capture if outcome.matched else None

    def _evaluate(self, text: str) -> MatchOutcome:
        applies = self._automaton.accepts(text) ^ self._exclude
        if not applies:
            return MatchOutcome.NO_MATCH

        # exclude filters apply when the pattern does not match, nothing to capture
        if self._exclude:
            return MatchOutcome.positive(UNCAPTURED)

        capture = self._full_matcher.evaluate(text)
        if capture is None:
            logger.warning("Pattern '%s' accepted '%s' as automaton but not as full match",
                           self.get_pattern(), text)
            capture = UNCAPTURED
        return MatchOutcome.positive(capture)

    def get_replacement_text(self, record: Any, group_index: int,
                             match_state: Optional[CaptureResult]) -> Optional[str]:
        """
        Return the label text for a record this filter applies to.

        Args:
            record: The record ``applies_to`` was called with
            group_index: Capturing group to extract, -1 for the full text
            match_state: The value returned by ``applies_to``

        Returns:
            The subject text for exclude filters, blank filters and a group
            index of -1; otherwise the group's substring, or None if that
            group did not take part in the match

        Raises:
            CaptureGroupOutOfRange: If the pattern has no group ``group_index``
            CaptureUnavailableError: If the engines disagreed and no capture
                was taken for this text
        """
        if self._exclude or self._automaton is None or group_index == NO_REPLACEMENT:
            return self.get_text(record)

        if match_state is None:
            raise ValueError("match_state is None; only call get_replacement_text for applying records")

        if group_index < 0 or group_index > self._full_matcher.group_count:
            raise CaptureGroupOutOfRange(group_index, self.get_text(record), self.get_pattern())

        if not match_state.captured:
            raise CaptureUnavailableError(group_index, self.get_text(record), self.get_pattern())

        return match_state.group(group_index)

    def get_pattern(self) -> str:
        """Returns the filter pattern string."""
        return '' if self._full_matcher is None else self._full_matcher.pattern

    def is_empty(self) -> bool:
        """Whether this filter has an empty pattern."""
        return self._automaton is None

    def is_exclude(self) -> bool:
        """Whether this filter is an exclude filter."""
        return self._exclude

    def is_caching(self) -> bool:
        return self._cache is not None

    def cache_stats(self) -> Optional[Dict[str, Any]]:
        """Statistics of the result cache, None when caching is disabled."""
        return None if self._cache is None else self._cache.stats()

    def clone(self) -> 'RequestFilter':
        """
        Return an identically configured filter with its own empty cache.

        Compiled automaton and pattern are shared; both are immutable.
        """
        twin = copy.copy(self)
        if self._cache is not None:
            twin._cache = ResultCache(self._cache.capacity)
        return twin

    def __str__(self) -> str:
        return "{ type: '%s', pattern: '%s', isExclude: %s }" % (
            self.type_code, self.get_pattern(), str(self._exclude).lower())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self})"
