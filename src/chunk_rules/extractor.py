"""RuleExtractor: orchestrator that wires SentenceSource + TreeBuilder +
WrapperNormalizer + PhraseGenerator into rule sets and corpus documents.

Architecture:
- extract() reads every sentence block, then splits the blocks into one
  contiguous batch per worker and runs the batches on a thread pool.  Each
  worker owns its TreeBuilder and ClassificationCache and returns local
  outcomes; nothing mutable is shared between workers, so no lock is taken.
- After the pool drains (the synchronization barrier), the outcomes are
  merged once by merge_rules() into a deduplicated, lexicographically
  ordered list, so output never depends on scheduling.
- A MalformedLevelError or UnresolvableAncestorError raised by any worker
  propagates out of extract() and aborts the run; create_corpus() therefore
  writes nothing for a malformed corpus.
"""

from __future__ import annotations

import logging
import os
import time
from collections.abc import Callable, Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, TypeVar

from chunk_rules.cache import ClassificationCache
from chunk_rules.classifier import LineClassifier
from chunk_rules.config import ExtractionConfig
from chunk_rules.phrase import PhraseGenerator
from chunk_rules.result import ExtractionResult
from chunk_rules.source import SentenceSource
from chunk_rules.surface import SurfaceForm, render_document
from chunk_rules.tree.builder import TreeBuilder
from chunk_rules.tree.normalizer import WrapperNormalizer

if TYPE_CHECKING:
    from chunk_rules.protocols import ValueRecognizer
    from chunk_rules.tree.nodes import TreeNode

__all__ = ["RuleExtractor", "merge_rules"]

logger = logging.getLogger(__name__)

_T = TypeVar("_T")


@dataclass(frozen=True, slots=True)
class _SentenceOutcome:
    phrase: str
    skipped: int


@dataclass(frozen=True, slots=True)
class _Worker:
    """Per-worker state: a builder reading through its own cache."""

    builder: TreeBuilder
    cache: ClassificationCache


def merge_rules(*partials: Iterable[str]) -> list[str]:
    """Union rule collections into one sorted list without duplicates."""
    merged: set[str] = set()
    for partial in partials:
        merged.update(partial)
    return sorted(merged)


class RuleExtractor:
    """Orchestrator for chunk-rule extraction.

    Example::

        from chunk_rules.extractor import RuleExtractor

        extractor = RuleExtractor()
        rules = extractor.generate("Bosque_CF_8.0.ad.txt")
        extractor.create_corpus(
            "Bosque_CF_8.0.ad.txt", "np_phrase.txt", "tagged_phrase.txt"
        )

    Two RuleExtractor instances never share cache state.
    """

    def __init__(
        self,
        config: ExtractionConfig | None = None,
        recognizers: Sequence[ValueRecognizer] | None = None,
        max_cache_size: int = 4096,
    ) -> None:
        """Initialise the extractor.

        Args:
            config: Corpus dialect and run settings.  Defaults to
                ``ExtractionConfig()``.
            recognizers: Line recognizers in priority order.  Defaults to the
                AD recognizers for ``config.level_marker``.
            max_cache_size: Lines held by each worker's classification LRU
                cache.  This is an infrastructure parameter, not part of
                ExtractionConfig.
        """
        self._config = config if config is not None else ExtractionConfig()
        self._recognizers = recognizers
        self._max_cache_size = max_cache_size
        self._worker = self._new_worker()
        self._normalizer = WrapperNormalizer(self._config.transparent_forms)
        self._generator = PhraseGenerator()

    @property
    def config(self) -> ExtractionConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def generate(self, source_file: str | Path) -> list[str]:
        """Return the distinct rules of ``source_file`` in sorted order.

        Every rule ends with ``config.line_separator``.
        """
        return self.extract(source_file).rules

    def extract(self, source_file: str | Path) -> ExtractionResult:
        """Extract rules and diagnostics from ``source_file``.

        Raises:
            OSError: The corpus cannot be read.
            MalformedLevelError, UnresolvableAncestorError: Some sentence
                cannot be turned into a tree.
        """
        t0 = time.perf_counter()

        sentences = self._read(source_file)
        outcomes, workers = self._map(self._process_sentence, sentences)

        separator = self._config.line_separator
        rules = merge_rules(
            f"{outcome.phrase}{separator}" for outcome in outcomes if outcome.phrase
        )
        empty = sum(1 for outcome in outcomes if not outcome.phrase)
        skipped = sum(outcome.skipped for outcome in outcomes)
        hits = sum(worker.cache.hits for worker in workers)
        misses = sum(worker.cache.misses for worker in workers)

        elapsed_ms = (time.perf_counter() - t0) * 1000.0
        if skipped:
            logger.info(f"Skipped {skipped} lines no recognizer matched")
        logger.info(
            f"Extracted {len(rules)} distinct rules from {len(sentences)} "
            f"sentences in {elapsed_ms:.1f} ms using {len(workers)} workers "
            f"(classification cache: {hits} hits, {misses} misses)"
        )

        return ExtractionResult(
            rules=rules,
            sentences=len(sentences),
            empty_sentences=empty,
            skipped_lines=skipped,
            computation_time_ms=elapsed_ms,
        )

    def build_trees(self, source_file: str | Path) -> list[TreeNode]:
        """Return the normalized tree of every sentence, in file order."""
        trees, _ = self._map(self._build_tree, self._read(source_file))
        return trees

    def build_tree(self, sentence: str) -> TreeNode:
        """Build and normalize the tree of a single sentence block."""
        return self._build_tree(self._worker, sentence)

    def create_corpus(
        self,
        source_file: str | Path,
        result_annotated: str | Path,
        result_tagged: str | Path,
    ) -> ExtractionResult:
        """Write the NP-phrase and tagged-phrase documents for ``source_file``.

        Args:
            source_file: Corpus to read.
            result_annotated: Output path of the NP-phrase document.
            result_tagged: Output path of the tagged-phrase document.

        Returns:
            The ExtractionResult the documents were written from.

        Raises:
            OSError: Reading the corpus or writing either document failed.
        """
        result = self.extract(source_file)

        separator = self._config.line_separator
        tagged = render_document(result.rules, SurfaceForm.TAGGED, separator)
        annotated = render_document(result.rules, SurfaceForm.NP, separator)

        self._write(result_tagged, tagged)
        self._write(result_annotated, annotated)
        return result

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _read(self, source_file: str | Path) -> list[str]:
        return SentenceSource(source_file, encoding=self._config.encoding).read()

    def _write(self, path: str | Path, text: str) -> None:
        # newline="" keeps the configured separator byte-exact on every platform
        with Path(path).open("w", encoding=self._config.encoding, newline="") as fh:
            fh.write(text)
        logger.info(f"Wrote {path}")

    def _new_worker(self) -> _Worker:
        classifier = LineClassifier(
            self._recognizers, marker=self._config.level_marker
        )
        cache = ClassificationCache(classifier, max_size=self._max_cache_size)
        builder = TreeBuilder(config=self._config, classifier=cache)
        return _Worker(builder=builder, cache=cache)

    def _worker_count(self, jobs: int) -> int:
        # Same default as ThreadPoolExecutor when max_workers is None.
        limit = self._config.max_workers or min(32, (os.cpu_count() or 1) + 4)
        return max(1, min(limit, jobs))

    def _map(
        self, func: Callable[[_Worker, str], _T], sentences: list[str]
    ) -> tuple[list[_T], list[_Worker]]:
        """Apply ``func`` to every sentence with one fresh worker per batch.

        Sentences are split into contiguous batches, one per worker, so
        results come back in input order.  The first exception raised by any
        call is re-raised here.

        Returns:
            ``(results, workers)``; the workers carry their cache statistics.
        """
        count = self._worker_count(len(sentences))
        if count == 1:
            worker = self._new_worker()
            return [func(worker, sentence) for sentence in sentences], [worker]

        size = -(-len(sentences) // count)
        batches = [
            sentences[start : start + size]
            for start in range(0, len(sentences), size)
        ]
        workers = [self._new_worker() for _ in batches]

        def run(worker: _Worker, batch: list[str]) -> list[_T]:
            return [func(worker, sentence) for sentence in batch]

        with ThreadPoolExecutor(max_workers=len(batches)) as pool:
            parts = list(pool.map(run, workers, batches))
        return [result for part in parts for result in part], workers

    def _build_tree(self, worker: _Worker, sentence: str) -> TreeNode:
        return self._normalizer.normalize(worker.builder.build(sentence))

    def _process_sentence(self, worker: _Worker, sentence: str) -> _SentenceOutcome:
        raw, skipped = worker.builder.build_counted(sentence)
        phrase = self._generator.generate(self._normalizer.normalize(raw))
        return _SentenceOutcome(phrase=phrase, skipped=skipped)
