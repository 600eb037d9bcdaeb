"""Public API functions for chunk-rules.

This module provides the user-facing functions: extract_rules,
generate_rules and create_corpus.  Each call creates a fresh RuleExtractor
so no cache or state survives between calls.
"""

from __future__ import annotations

from pathlib import Path

from chunk_rules.config import ExtractionConfig
from chunk_rules.extractor import RuleExtractor
from chunk_rules.result import ExtractionResult

__all__ = ["create_corpus", "extract_rules", "generate_rules"]


def extract_rules(
    source_file: str | Path,
    config: ExtractionConfig | None = None,
) -> ExtractionResult:
    """Extract the rules of a corpus file together with run diagnostics.

    Args:
        source_file: AD corpus file.
        config:      Dialect and run settings.  Defaults to
                     ``ExtractionConfig()`` when None.

    Returns:
        An ``ExtractionResult`` with rules, sentence count, empty-sentence
        count, skipped-line count and timing populated.
    """
    return RuleExtractor(config=config).extract(source_file)


def generate_rules(
    source_file: str | Path,
    config: ExtractionConfig | None = None,
) -> list[str]:
    """Return the distinct rules of a corpus file in lexicographic order.

    Every rule ends with the configured line separator.
    """
    return RuleExtractor(config=config).generate(source_file)


def create_corpus(
    source_file: str | Path,
    result_annotated: str | Path,
    result_tagged: str | Path,
    config: ExtractionConfig | None = None,
) -> ExtractionResult:
    """Write the NP-phrase and tagged-phrase documents of a corpus file.

    Args:
        source_file:      AD corpus file.
        result_annotated: Output path of the NP-phrase document.
        result_tagged:    Output path of the tagged-phrase document.
        config:           Dialect and run settings.

    Returns:
        The ``ExtractionResult`` both documents were written from.
    """
    return RuleExtractor(config=config).create_corpus(
        source_file, result_annotated, result_tagged
    )
