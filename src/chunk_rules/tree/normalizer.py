"""WrapperNormalizer: splices transparent wrapper nodes out of a sentence tree.

AD annotation wraps constituents in clause and phrase nodes (``fcl``,
``pp``, ``vp``, ...) that carry no information a noun-phrase chunk rule
needs.  Normalization rebuilds the tree without them: a wrapper's children
are promoted, in order, to the position the wrapper occupied.  Wrappers
nested inside wrappers collapse in the same pass, so normalizing a
normalized tree returns an identical tree.

This is the only place that decides which labels are transparent.
"""

from __future__ import annotations

import re

from chunk_rules.config import DEFAULT_TRANSPARENT_FORMS
from chunk_rules.tree.nodes import TreeNode

__all__ = ["WrapperNormalizer"]


class WrapperNormalizer:
    """Produces a fresh tree with transparent wrapper nodes removed.

    The input tree is never modified.  The root is copied (label, level and
    source_text) and never spliced, even when its label is transparent.

    Example usage:
        normalizer = WrapperNormalizer()
        # SENTENCE -> fcl -> [np -> a_ART, é_V-FIN]
        normalized = normalizer.normalize(root)
        # SENTENCE -> [np -> a_ART, é_V-FIN]

    Args:
        transparent_forms: Regex alternation of wrapper labels, matched
            against the whole label.
    """

    def __init__(self, transparent_forms: str = DEFAULT_TRANSPARENT_FORMS) -> None:
        self._transparent = re.compile(f"(?:{transparent_forms})")

    def is_transparent(self, node: TreeNode) -> bool:
        return self._transparent.fullmatch(node.label) is not None

    def normalize(self, node: TreeNode) -> TreeNode:
        """Return a normalized copy of the subtree rooted at ``node``."""
        result = TreeNode(node.label, node.level, source_text=node.source_text)
        for child in node.children:
            for promoted in self._splice(child):
                result.add_child(promoted)
        return result

    def _splice(self, node: TreeNode) -> list[TreeNode]:
        if not self.is_transparent(node):
            return [self.normalize(node)]
        spliced: list[TreeNode] = []
        for child in node.children:
            spliced.extend(self._splice(child))
        return spliced
