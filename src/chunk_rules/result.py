"""ExtractionResult dataclass for rule-extraction output.

This module provides the result type returned by RuleExtractor.extract()
and RuleExtractor.create_corpus().
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["ExtractionResult"]


@dataclass(frozen=True, slots=True)
class ExtractionResult:
    """Rules and diagnostics of one extraction run.

    Attributes:
        rules: Distinct rendered rules in lexicographic order, each ending
            with the configured line separator.
        sentences: Number of sentence blocks read from the corpus.
        empty_sentences: Blocks that rendered to nothing and yielded no rule.
        skipped_lines: Content lines no recognizer matched, summed over all
            sentences.
        computation_time_ms: Wall-clock duration of the run in milliseconds.
    """

    rules: list[str]
    sentences: int
    empty_sentences: int
    skipped_lines: int
    computation_time_ms: float
