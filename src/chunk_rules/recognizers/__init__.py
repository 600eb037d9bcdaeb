"""Recognizers subpackage for chunk-rules.

Provides the AD-notation recognizers and the default priority order in which
LineClassifier tries them.  All recognizers satisfy the ``ValueRecognizer``
Protocol structurally.
"""

from __future__ import annotations

from chunk_rules.recognizers.ad import (
    PhraseRecognizer,
    PunctuationRecognizer,
    TerminalRecognizer,
)

__all__ = [
    "PhraseRecognizer",
    "PunctuationRecognizer",
    "TerminalRecognizer",
    "default_recognizers",
]


def default_recognizers(
    marker: str = "=",
) -> list[PunctuationRecognizer | TerminalRecognizer | PhraseRecognizer]:
    """Return the AD recognizers in priority order.

    Punctuation is tried first so a bare mark is never mistaken for anything
    else; terminals come before phrases because a terminal line is a phrase
    header with a word appended.
    """
    return [
        PunctuationRecognizer(marker),
        TerminalRecognizer(marker),
        PhraseRecognizer(marker),
    ]
