"""TreeNode dataclass for leveled phrase-structure trees.

Provides the ownership and navigation primitive used by TreeBuilder to
rebuild a sentence tree from its leveled lines, and by the normalizer and
phrase generator to walk it afterwards.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from chunk_rules.errors import UnresolvableAncestorError

__all__ = ["TreeNode"]

# A bare single punctuation mark: ",", ".", ";", "«", ...
_PUNCTUATION = re.compile(r"[^\w\s]")


@dataclass(slots=True, eq=False)
class TreeNode:
    """A constituent or terminal in a sentence tree.

    Attributes:
        label:       Phrase form for constituents (e.g. "np"); "word_TAG" or a
                     bare punctuation mark for leaves.
        level:       Depth in the source encoding.  The synthetic root is 0.
        children:    Owned child nodes in source order.  Must use
                     field(default_factory=list) so instances never share it.
        parent:      Non-owning back-reference, None on the root.  Set only by
                     add_child().
        source_text: The original sentence block (root only).
    """

    label: str
    level: int
    children: list[TreeNode] = field(default_factory=list)
    parent: TreeNode | None = field(default=None, repr=False)
    source_text: str = field(default="", repr=False)

    @property
    def is_punctuation(self) -> bool:
        """True when the label is a single punctuation character."""
        return _PUNCTUATION.fullmatch(self.label) is not None

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def add_child(self, node: TreeNode) -> TreeNode:
        """Append ``node`` to the children and take ownership of it."""
        node.parent = self
        self.children.append(node)
        return node

    def back(self, target_level: int) -> TreeNode:
        """Return the nearest node on the parent chain at ``target_level``.

        The search starts at this node itself.

        Raises:
            UnresolvableAncestorError: If no node on the chain has that level.
        """
        node: TreeNode | None = self
        while node is not None:
            if node.level == target_level:
                return node
            node = node.parent
        raise UnresolvableAncestorError(target_level)
