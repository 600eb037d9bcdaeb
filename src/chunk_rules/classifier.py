"""LineClassifier: turns one annotation line into a nesting level and a value.

The classifier holds an explicit, ordered list of ValueRecognizer strategies.
The first recognizer whose ``matches`` accepts the line supplies the value;
when none does the line has no value and the caller skips it.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import TYPE_CHECKING

from chunk_rules.errors import MalformedLevelError
from chunk_rules.recognizers import default_recognizers

if TYPE_CHECKING:
    from chunk_rules.protocols import ValueRecognizer

__all__ = ["LineClassifier"]


class LineClassifier:
    """Level arithmetic and value recognition for leveled lines.

    Example::

        classifier = LineClassifier()
        classifier.level("==H:n('casa' F S)\tcasa")   # 2
        classifier.classify("==H:n('casa' F S)\tcasa")  # "casa_N"
        classifier.classify("==FRAG")                 # None

    Args:
        recognizers: Strategies in priority order.  Defaults to
            ``default_recognizers(marker)``.
        marker: The nesting-marker character.
    """

    def __init__(
        self,
        recognizers: Sequence[ValueRecognizer] | None = None,
        marker: str = "=",
    ) -> None:
        self._recognizers: tuple[ValueRecognizer, ...] = tuple(
            recognizers if recognizers is not None else default_recognizers(marker)
        )
        self._marker = marker
        self._level = re.compile(f"{re.escape(marker)}+")

    @property
    def recognizers(self) -> tuple[ValueRecognizer, ...]:
        return self._recognizers

    @property
    def marker(self) -> str:
        return self._marker

    def level(self, line: str) -> int:
        """Count the nesting markers at the start of ``line``.

        Raises:
            MalformedLevelError: If the line does not start with a marker.
        """
        match = self._level.match(line)
        if match is None:
            raise MalformedLevelError(line)
        return match.end()

    def classify(self, line: str) -> str | None:
        """Return the value of the first recognizer matching ``line``, or None."""
        for recognizer in self._recognizers:
            if recognizer.matches(line):
                return recognizer.extract(line)
        return None
