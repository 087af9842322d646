"""
Bounded result cache for request filters.

Maps a subject text to the outcome of evaluating a filter against it, with
least-recently-used eviction. A filter owns its cache exclusively, so there is
no locking here; parallel report processing builds one filter (and therefore
one cache) per worker.

Three states are distinguishable for any text:
- ``get`` returns ``None``: never evaluated (or evicted)
- ``get`` returns ``MatchOutcome.NO_MATCH``: confirmed negative
- ``get`` returns a matched ``MatchOutcome``: confirmed positive, with capture
"""

from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class MatchOutcome:
    """
    Tagged value stored in the result cache.

    Attributes:
        matched: Whether the filter applied to the text
        capture: The match state handed back to callers when ``matched`` is True
    """
    matched: bool
    capture: Any = None

    @classmethod
    def positive(cls, capture: Any) -> 'MatchOutcome':
        return cls(matched=True, capture=capture)

    def __repr__(self) -> str:
        if not self.matched:
            return "MatchOutcome.NO_MATCH"
        return f"MatchOutcome(matched=True, capture={self.capture!r})"


# Reserved instance for a confirmed negative; compare by identity or equality.
MatchOutcome.NO_MATCH = MatchOutcome(matched=False)


class ResultCache:
    """
    LRU map from subject text to ``MatchOutcome``.

    Both ``get`` and ``put`` are O(1) amortized. A lookup that hits moves the
    entry to the most-recently-used end; ``put`` beyond capacity drops the
    entry at the least-recently-used end.
    """

    def __init__(self, capacity: int):
        """
        Args:
            capacity: Maximum number of entries, must be positive

        Raises:
            ValueError: If capacity is not positive
        """
        if capacity <= 0:
            raise ValueError(f"Result cache capacity must be positive, got {capacity}")

        self.capacity = capacity
        self._entries: 'OrderedDict[str, MatchOutcome]' = OrderedDict()
        self._stats = {
            'hits': 0,
            'misses': 0,
            'evictions': 0,
        }

    def get(self, text: str) -> Optional[MatchOutcome]:
        """Return the cached outcome for ``text``, or None if absent."""
        outcome = self._entries.get(text)
        if outcome is None:
            self._stats['misses'] += 1
            return None

        self._entries.move_to_end(text)
        self._stats['hits'] += 1
        return outcome

    def put(self, text: str, outcome: MatchOutcome) -> None:
        """Store ``outcome`` for ``text``, evicting the LRU entry when full."""
        if text in self._entries:
            self._entries.move_to_end(text)
        elif len(self._entries) >= self.capacity:
            self._entries.popitem(last=False)
            self._stats['evictions'] += 1

        self._entries[text] = outcome

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, text: object) -> bool:
        # membership test does not touch recency
        return text in self._entries

    def stats(self) -> Dict[str, Any]:
        """Get a copy of current cache statistics."""
        stats_copy = dict(self._stats)
        lookups = stats_copy['hits'] + stats_copy['misses']
        stats_copy['hit_rate'] = (stats_copy['hits'] / lookups * 100) if lookups else 0.0
        stats_copy['size'] = len(self._entries)
        stats_copy['max_size'] = self.capacity
        return stats_copy
