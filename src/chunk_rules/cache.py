"""ClassificationCache: LRU-backed caching proxy for a LineClassifier.

Treebank corpora repeat the same lines constantly (``=.``, ``==>N:art('o'
<artd> M S)	o``, ...).  The cache wraps a LineClassifier and remembers the
value found for each line, including "no value" (None), so repeated lines
never run the recognizer chain again.  LRU eviction occurs silently when
``max_size`` is exceeded.

A cache belongs to a single worker: RuleExtractor gives every worker of a
run its own instance, so lookups take no lock.  Each instance owns its own
``LRUCache``; two instances never share state.

Example::

    from chunk_rules.cache import ClassificationCache
    from chunk_rules.classifier import LineClassifier

    cache = ClassificationCache(LineClassifier(), max_size=4096)
    cache.classify("==H:n('casa' F S)\tcasa")   # recognizers run
    cache.classify("==H:n('casa' F S)\tcasa")   # served from memory
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cachetools import LRUCache

if TYPE_CHECKING:
    from chunk_rules.classifier import LineClassifier

__all__ = ["ClassificationCache"]


class ClassificationCache:
    """LRU-backed caching proxy around a LineClassifier.

    Exposes the same ``level`` / ``classify`` surface as LineClassifier, so
    TreeBuilder accepts either.  Only ``classify`` is cached; level counting
    is a single regex match and cheaper than a lookup.

    Args:
        classifier: The LineClassifier to delegate to on a miss.
        max_size: Maximum number of lines held in memory.  Defaults to 4096.

    Attributes:
        hits: Lookups answered from memory.
        misses: Lookups that ran the recognizers.
    """

    def __init__(self, classifier: LineClassifier, max_size: int = 4096) -> None:
        self._classifier = classifier
        self._cache: LRUCache[str, str | None] = LRUCache(maxsize=max_size)
        self.hits = 0
        self.misses = 0

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def marker(self) -> str:
        return self._classifier.marker

    # ------------------------------------------------------------------
    # LineClassifier surface
    # ------------------------------------------------------------------

    def level(self, line: str) -> int:
        return self._classifier.level(line)

    def classify(self, line: str) -> str | None:
        """Return the cached value for ``line``, classifying it on a miss."""
        if line in self._cache:
            self.hits += 1
            return self._cache[line]

        self.misses += 1
        value = self._classifier.classify(line)
        self._cache[line] = value
        return value
