"""
Automaton stage of the filter pipeline.

Patterns are compiled with RE2, which evaluates them with finite automata and
never backtracks, so a boolean accept/reject answer costs time linear in the
input. Compiled automata are immutable and comparatively expensive to build,
so they are kept in an ``AutomatonTable`` keyed by pattern text.

Lifecycle of the process-wide table returned by ``get_automaton_table``:
- populated lazily, the first time a filter with a given pattern is built
- entries are permanent for the life of the process and never recompiled
- size is bounded by the number of distinct configured patterns, not by the
  number of evaluated requests
"""

import time
from dataclasses import dataclass, field
from typing import Any, Dict, List

import re2

from report_filter.matcher.errors import InvalidPatternError
from report_filter.utils.logging_config import get_logger

# Module logger
logger = get_logger(__name__)


@dataclass(frozen=True)
class Automaton:
    """
    Compiled RE2 automaton for one pattern.

    Attributes:
        pattern: Source pattern text
        compile_time: Seconds spent compiling
    """
    pattern: str
    compile_time: float = 0.0
    _regex: Any = field(default=None, repr=False, compare=False)

    def accepts(self, text: str) -> bool:
        """Return True if the pattern matches the whole of ``text``."""
        return self._regex.fullmatch(text) is not None


def compile_automaton(pattern: str) -> Automaton:
    """
    Compile ``pattern`` into an automaton.

    Raises:
        InvalidPatternError: If RE2 rejects the pattern, e.g. because it uses
            backreferences or lookaround
    """
    start = time.perf_counter()
    try:
        regex = re2.compile(pattern)
    except re2.error as e:
        raise InvalidPatternError(str(e), pattern, engine="RE2") from e
    compile_time = time.perf_counter() - start

    logger.debug("Compiled automaton for pattern %r in %.6fs", pattern, compile_time)
    return Automaton(pattern=pattern, compile_time=compile_time, _regex=regex)


class AutomatonTable:
    """
    Insert-only table of compiled automata, one per distinct pattern text.

    Safe for concurrent use without a lock: lookups are plain dict reads and
    inserts go through ``dict.setdefault``. Two workers racing on the same
    uncompiled pattern may both compile it; both results are equivalent and
    whichever lands first is kept. Statistics are approximate under concurrency.
    """

    def __init__(self):
        self._automata: Dict[str, Automaton] = {}
        self._stats = {
            'lookups': 0,
            'compilations': 0,
        }

    def get_or_compile(self, pattern: str) -> Automaton:
        """
        Return the automaton for ``pattern``, compiling it on first request.

        Raises:
            InvalidPatternError: If the pattern cannot be compiled; nothing is
                stored in that case
        """
        self._stats['lookups'] += 1
        automaton = self._automata.get(pattern)
        if automaton is None:
            automaton = compile_automaton(pattern)
            self._stats['compilations'] += 1
            automaton = self._automata.setdefault(pattern, automaton)
        return automaton

    def patterns(self) -> List[str]:
        return list(self._automata)

    def __len__(self) -> int:
        return len(self._automata)

    def __contains__(self, pattern: object) -> bool:
        return pattern in self._automata

    def stats(self) -> Dict[str, Any]:
        """Get a copy of current table statistics."""
        stats_copy = dict(self._stats)
        stats_copy['size'] = len(self._automata)
        stats_copy['total_compile_time'] = sum(a.compile_time for a in list(self._automata.values()))
        return stats_copy


# Process-wide table shared by every filter that is not handed its own
_AUTOMATON_TABLE = AutomatonTable()


def get_automaton_table() -> AutomatonTable:
    """
    Get the process-wide automaton table.

    Returns:
        AutomatonTable: The global table instance
    """
    return _AUTOMATON_TABLE
