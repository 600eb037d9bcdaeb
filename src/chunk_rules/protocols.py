"""ValueRecognizer Protocol: the line-classification extension point.

Defines the structural interface every recognizer strategy must satisfy.
Corpus dialects can plug in extra recognizers without inheriting from any
base class: any class with conformant ``matches`` and ``extract`` methods
passes ``isinstance`` checks.

Example::

    from chunk_rules.protocols import ValueRecognizer

    class CommentRecognizer:
        def matches(self, line: str) -> bool:
            return line.startswith("=#")

        def extract(self, line: str) -> str:
            return "#"

    assert isinstance(CommentRecognizer(), ValueRecognizer)
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

__all__ = ["ValueRecognizer"]


@runtime_checkable
class ValueRecognizer(Protocol):
    """Structural protocol for line recognizers.

    ``matches`` decides whether the line encodes a value this recognizer
    understands; ``extract`` is only called on lines for which ``matches``
    returned True and returns the node label for that line.
    """

    def matches(self, line: str) -> bool: ...

    def extract(self, line: str) -> str: ...
