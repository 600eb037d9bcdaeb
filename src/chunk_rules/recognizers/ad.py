"""Recognizers for the AD (Floresta Sintá(c)tica) line notation.

Every content line of an AD block starts with one or more nesting markers
followed by one of three shapes::

    =,                                      punctuation
    ==H:n('casa' F S)	casa                terminal: FUNCTION:pos(features) word
    =SUBJ:np                                constituent: FUNCTION:form

Each recognizer satisfies the ValueRecognizer Protocol structurally.  The
nesting marker is a constructor argument so other dialects can reuse the
same shapes.
"""

from __future__ import annotations

import re

__all__ = ["PhraseRecognizer", "PunctuationRecognizer", "TerminalRecognizer"]


class _PatternRecognizer:
    """Shared plumbing: a compiled full-line pattern and its first group."""

    _body = ""

    def __init__(self, marker: str = "=") -> None:
        m = re.escape(marker)
        self._pattern = re.compile(f"{m}+{self._body.format(m=m)}\\s*")

    def matches(self, line: str) -> bool:
        return self._pattern.fullmatch(line) is not None

    def extract(self, line: str) -> str:
        match = self._pattern.fullmatch(line)
        if match is None:
            msg = f"{type(self).__name__} cannot extract a value from {line!r}"
            raise ValueError(msg)
        return self._value(match)

    def _value(self, match: re.Match[str]) -> str:
        return match.group(1)


class PunctuationRecognizer(_PatternRecognizer):
    """A single punctuation mark on its own, e.g. ``==,`` -> ``","``."""

    _body = r"([^\w\s{m}])"


class TerminalRecognizer(_PatternRecognizer):
    """A word with its part of speech, rendered as ``word_POS``.

    The POS is upper-cased so it can be told apart from phrase forms and
    stripped again by the NP surface transform::

        ==H:n('casa' F S)	casa   ->  "casa_N"
        =P:v-fin('ser' PR 3S IND VFIN)	é   ->  "é_V-FIN"
    """

    _body = r"[^:\s]+:([a-z][a-z\-]*)(?:\(.*\))?\s+(\S+)"

    def _value(self, match: re.Match[str]) -> str:
        return f"{match.group(2)}_{match.group(1).upper()}"


class PhraseRecognizer(_PatternRecognizer):
    """A constituent header; the value is its form, e.g. ``=SUBJ:np`` -> ``"np"``."""

    _body = r"[^:\s]+:([a-z]+)"
