"""PhraseGenerator: renders a normalized sentence tree as one rule string.

Rendering is a plain recursive walk in structural order::

    constituent  ->  "np[ a_ART casa_N ]"
    leaf         ->  "casa_N"
    level-0 root ->  its children, space-joined, without label or brackets

so the sentence ``SENTENCE -> [np -> [a_ART, casa_N], é_V-FIN]`` renders
as ``"np[ a_ART casa_N ] é_V-FIN"``.
"""

from __future__ import annotations

from chunk_rules.tree.nodes import TreeNode

__all__ = ["PhraseGenerator"]


class PhraseGenerator:
    """Renders normalized trees into bracketed phrase strings."""

    def generate(self, node: TreeNode) -> str:
        """Render ``node`` and strip surrounding whitespace.

        An empty string means the tree has no content and yields no rule.
        """
        return self._render(node).strip()

    def _render(self, node: TreeNode) -> str:
        inner = " ".join(self._render(child) for child in node.children)
        if node.level == 0:
            return inner
        if node.is_leaf:
            return node.label
        return f"{node.label}[ {inner} ]"
