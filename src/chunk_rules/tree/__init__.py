"""Tree subpackage for sentence-tree reconstruction primitives.

Re-exports the public API for the tree module:
- TreeNode: labeled, leveled node with add_child() and back() navigation
- TreeBuilder: rebuilds a raw TreeNode tree from one leveled sentence block
- WrapperNormalizer: splices transparent wrapper nodes out of a tree
"""

from chunk_rules.tree.builder import TreeBuilder
from chunk_rules.tree.nodes import TreeNode
from chunk_rules.tree.normalizer import WrapperNormalizer

__all__ = ["TreeBuilder", "TreeNode", "WrapperNormalizer"]
