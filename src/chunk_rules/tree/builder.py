"""TreeBuilder: rebuilds a raw sentence tree from leveled annotation lines.

Nesting is encoded only by the number of leading markers on each line, so
the builder keeps a cursor on the last attached non-punctuation node and,
for every new line, climbs back up the parent chain to the node exactly one
level above the new one before attaching it there.

Line handling, in order:
- terminator lines (``</s>``, bare ``.``) are skipped;
- before the body starts, lines without the ``FUNCTION:form`` shape are
  header lines and are skipped (a bare start label such as ``S`` is one of
  them, so a block that relies on it never starts);
- the first ``FUNCTION:form`` line (``STA:fcl``) starts the body and is
  discarded;
- every later line is a content line: its level must be computable, and a
  line no recognizer understands is skipped and counted.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Protocol

from chunk_rules.classifier import LineClassifier
from chunk_rules.config import ExtractionConfig
from chunk_rules.errors import UnresolvableAncestorError
from chunk_rules.tree.nodes import TreeNode

__all__ = ["TreeBuilder"]

logger = logging.getLogger(__name__)


class _Classifier(Protocol):
    @property
    def marker(self) -> str: ...

    def level(self, line: str) -> int: ...

    def classify(self, line: str) -> str | None: ...


@dataclass
class TreeBuilder:
    """Converts one sentence block into a raw TreeNode tree.

    The root is a synthetic node labeled ``config.root_label`` at level 0
    carrying the block in ``source_text``.  Every content node is attached
    exactly one level below the ancestor found by ``TreeNode.back``.

    Example::

        builder = TreeBuilder()
        root = builder.build("STA:fcl\\n=SUBJ:np\\n==H:n('casa' F S)\\tcasa")
        # root: SENTENCE(0) -> np(1) -> casa_N(2)

    Attributes:
        config:     Corpus dialect settings.
        classifier: LineClassifier (or ClassificationCache) used for levels
                    and values.  Defaults to a LineClassifier built for
                    ``config.level_marker``.
    """

    config: ExtractionConfig = field(default_factory=ExtractionConfig)
    classifier: _Classifier | None = None

    def __post_init__(self) -> None:
        self._classifier: _Classifier = (
            self.classifier
            if self.classifier is not None
            else LineClassifier(marker=self.config.level_marker)
        )
        self._sentence_end = re.compile(self.config.sentence_end)
        self._phrase_shape = re.compile(self.config.phrase_shape)

    def build(self, sentence: str) -> TreeNode:
        """Build the raw tree for ``sentence``.

        Raises:
            MalformedLevelError: A content line has no nesting marker.
            UnresolvableAncestorError: A content line is nested deeper than
                its predecessors allow.
        """
        root, _ = self.build_counted(sentence)
        return root

    def build_counted(self, sentence: str) -> tuple[TreeNode, int]:
        """Build the raw tree and count the content lines that had no value.

        Returns:
            ``(root, skipped)`` where ``skipped`` is the number of content
            lines no recognizer matched.
        """
        classifier = self._classifier

        root = TreeNode(self.config.root_label, 0, source_text=sentence)
        cursor = root
        started = False
        skipped = 0

        for line in sentence.splitlines():
            if self._sentence_end.fullmatch(line.strip()):
                continue

            if not started:
                if self._phrase_shape.match(line.lstrip(classifier.marker)):
                    started = True
                continue

            level = classifier.level(line)
            value = classifier.classify(line)
            if value is None:
                logger.debug(f"No recognizer for line, skipping: {line!r}")
                skipped += 1
                continue

            node = TreeNode(value, level)
            if cursor.level + 1 == level:
                cursor.add_child(node)
            else:
                try:
                    cursor.back(level - 1).add_child(node)
                except UnresolvableAncestorError as exc:
                    raise UnresolvableAncestorError(exc.level, line) from None

            if not node.is_punctuation:
                cursor = node

        return root, skipped
