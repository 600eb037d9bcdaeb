"""Surface forms: turn a rendered rule into a line of an output document.

Two forms are produced from every rule:

- TAGGED: the POS-tagged sentence with no chunk structure,
  ``"np[ a_ART casa_N ] é_V-FIN"`` -> ``"a_ART casa_N é_V-FIN"``
- NP: the untagged sentence with noun-phrase brackets,
  ``"np[ a_ART casa_N ] é_V-FIN"`` -> ``"np[ a casa] é"``

Each document line is the transformed rule followed by the literal
end-of-sentence marker ``" ."``.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from enum import StrEnum, auto

__all__ = [
    "SurfaceForm",
    "make_np_phrase",
    "make_tagged_phrase",
    "render_document",
]

# Compiled regex patterns (module-level, compiled once)

# The opening of a noun-phrase chunk, e.g. "np[".
_NP_OPEN = re.compile(r"np\[")

# Any chunk bracket.
_BRACKETS = re.compile(r"[\[\]]")

# A part-of-speech suffix on a word: "_N", "_ART", "_V-FIN".  Tags use the
# upper-case alphabet, so lower-case words containing "_" are left alone.
_TAG_SUFFIX = re.compile(r"_[A-Z][A-Z\-]*(?=[\s\]]|$)")

# A bracket pair around a bare comma.
_COMMA_BRACKET = re.compile(r"\[,\]")

# Whitespace right before a closing bracket: "casa ]" -> "casa]".
_SPACE_BEFORE_CLOSE = re.compile(r"\s+\]")

# Any whitespace run, including a trailing line terminator.
_WHITESPACE = re.compile(r"\s+")

SENTENCE_MARK = " ."


class SurfaceForm(StrEnum):
    """Which output document a rule is rendered for.

    - TAGGED -> "tagged" : POS-tagged words, no brackets
    - NP     -> "np"     : plain words, noun phrases bracketed
    """

    TAGGED = auto()
    NP = auto()


def _collapse(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


def make_tagged_phrase(rule: str) -> str:
    """Drop every chunk bracket, keeping the tagged words."""
    s = _NP_OPEN.sub("", rule)
    s = _BRACKETS.sub("", s)
    return _collapse(s)


def make_np_phrase(rule: str) -> str:
    """Drop the POS tags, keeping the noun-phrase brackets.

    Processing pipeline (applied in order):
    1. Remove ``_TAG`` suffixes.
    2. Rewrite ``[,]`` to ``,``.
    3. Remove whitespace before ``]``.
    4. Collapse whitespace runs and trim.
    """
    s = _TAG_SUFFIX.sub("", rule)
    s = _COMMA_BRACKET.sub(",", s)
    s = _SPACE_BEFORE_CLOSE.sub("]", s)
    return _collapse(s)


_TRANSFORMS = {
    SurfaceForm.TAGGED: make_tagged_phrase,
    SurfaceForm.NP: make_np_phrase,
}


def render_document(
    rules: Iterable[str], form: SurfaceForm, line_separator: str = "\n"
) -> str:
    """Join the ``form`` rendering of every rule, one per line, each ending ``" ."``."""
    transform = _TRANSFORMS[form]
    return "".join(
        f"{transform(rule)}{SENTENCE_MARK}{line_separator}" for rule in rules
    )
