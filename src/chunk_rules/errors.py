"""Fatal error types raised while rebuilding sentence trees.

Both errors mean the tree shape of a sentence is undefined.  They are never
caught per sentence: they propagate out of the extractor and abort the run
before any output is written.
"""

from __future__ import annotations

__all__ = [
    "MalformedLevelError",
    "RuleExtractionError",
    "UnresolvableAncestorError",
]


class RuleExtractionError(Exception):
    """Base class for fatal tree-construction errors."""


class MalformedLevelError(RuleExtractionError, ValueError):
    """A content line carries no nesting-marker prefix.

    Attributes:
        line: The offending input line.
    """

    def __init__(self, line: str) -> None:
        super().__init__(f"Cannot determine nesting level of line: {line!r}")
        self.line = line


class UnresolvableAncestorError(RuleExtractionError, LookupError):
    """No ancestor exists at the requested level.

    Raised by ``TreeNode.back`` when a line jumps deeper than the current
    cursor allows.  ``line`` is filled in by the builder when known.

    Attributes:
        level: The ancestor level that was searched for.
        line:  The input line being attached, or None.
    """

    def __init__(self, level: int, line: str | None = None) -> None:
        message = f"No ancestor at level {level}"
        if line is not None:
            message = f"{message} for line: {line!r}"
        super().__init__(message)
        self.level = level
        self.line = line
