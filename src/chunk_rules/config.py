"""ExtractionConfig: immutable settings for tree construction and rule output.

ExtractionConfig is a frozen (immutable) dataclass holding the corpus
dialect (nesting marker, line patterns, transparent forms) and the run
parameters (encoding, worker count).  Defaults match the AD notation of the
Floresta Sintá(c)tica treebanks.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = ["ExtractionConfig"]

# Clause and non-NP phrase forms.  Only ``np`` survives normalization, so the
# rendered rule brackets noun phrases and nothing else.
DEFAULT_TRANSPARENT_FORMS = r"fcl|icl|acl|cu|sq|x|par|pp|vp|adjp|advp"


@dataclass(frozen=True, slots=True)
class ExtractionConfig:
    """Immutable configuration for a rule-extraction run.

    Attributes:
        level_marker: Single character whose leading repetition count gives
            a line's nesting level.
        root_label: Label of the synthetic level-0 node every sentence tree
            hangs from.
        sentence_end: Regex matched against a whole line; matching lines are
            sentence terminators and carry no tree content.
        phrase_shape: Regex matched at the start of a line, after any
            nesting markers are removed; the first matching line of a block
            marks the start of the sentence body.
        transparent_forms: Alternation of labels that are pure grouping
            wrappers and are spliced out during normalization.
        line_separator: Terminator appended to every generated rule and to
            every line of the output documents.
        encoding: Text encoding for reading the corpus and writing outputs.
        max_workers: Thread pool size.  ``None`` lets the executor decide;
            ``1`` processes sentences inline.
    """

    level_marker: str = "="
    root_label: str = "SENTENCE"
    sentence_end: str = r"</s>|[.!?]"
    phrase_shape: str = r"[^\s:]+:\S"
    transparent_forms: str = DEFAULT_TRANSPARENT_FORMS
    line_separator: str = "\n"
    encoding: str = "utf-8"
    max_workers: int | None = None

    def __post_init__(self) -> None:
        if len(self.level_marker) != 1 or self.level_marker.isspace():
            msg = (
                "level_marker must be one non-space character, "
                f"got {self.level_marker!r}"
            )
            raise ValueError(msg)
        if not self.root_label:
            msg = "root_label must not be empty"
            raise ValueError(msg)
        if self.line_separator not in ("\n", "\r\n"):
            msg = f"line_separator must be '\\n' or '\\r\\n', got {self.line_separator!r}"
            raise ValueError(msg)
        if self.max_workers is not None and self.max_workers < 1:
            msg = f"max_workers must be >= 1, got {self.max_workers}"
            raise ValueError(msg)
        for name in ("sentence_end", "phrase_shape", "transparent_forms"):
            try:
                re.compile(getattr(self, name))
            except re.error as exc:
                msg = f"{name} is not a valid regex: {exc}"
                raise ValueError(msg) from exc
