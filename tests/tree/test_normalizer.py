"""Tests for WrapperNormalizer.

Covers:
- Transparent wrappers are spliced out and their children promoted in order
- Nested wrapper chains collapse in a single pass
- np nodes and leaves are kept
- The root is copied, never spliced, and keeps its source_text
- The input tree is not modified
- Idempotence: normalizing a normalized tree changes nothing
"""

from __future__ import annotations

from typing import Any

import pytest

from chunk_rules.tree.builder import TreeBuilder
from chunk_rules.tree.nodes import TreeNode
from chunk_rules.tree.normalizer import WrapperNormalizer

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def normalizer() -> WrapperNormalizer:
    return WrapperNormalizer()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _same_structure(a: TreeNode, b: TreeNode) -> bool:
    """Recursively compare label, level and children of two trees."""
    if a.label != b.label or a.level != b.level or len(a.children) != len(b.children):
        return False
    return all(
        _same_structure(ac, bc) for ac, bc in zip(a.children, b.children, strict=True)
    )


def _tree(shape: tuple[str, list[Any]], level: int = 0) -> TreeNode:
    """Build a tree from nested ``(label, [children...])`` tuples."""
    label, children = shape
    node = TreeNode(label, level)
    for child in children:
        node.add_child(_tree(child, level + 1))
    return node


def _labels(node: TreeNode) -> list[str]:
    return [child.label for child in node.children]


def _nodes(root: TreeNode) -> list[TreeNode]:
    """Every node of the tree rooted at ``root``, in pre-order."""
    found = [root]
    for child in root.children:
        found.extend(_nodes(child))
    return found


class TestSplicing:
    def test_wrapper_children_are_promoted(self, normalizer: WrapperNormalizer) -> None:
        root = _tree(("SENTENCE", [("fcl", [("np", [("casa_N", [])]), ("é_V-FIN", [])])]))
        result = normalizer.normalize(root)
        assert _labels(result) == ["np", "é_V-FIN"]

    def test_promoted_children_keep_position(
        self, normalizer: WrapperNormalizer
    ) -> None:
        root = _tree(
            (
                "SENTENCE",
                [
                    ("ontem_ADV", []),
                    ("pp", [("de_PRP", []), ("np", [("casa_N", [])])]),
                    (".", []),
                ],
            )
        )
        result = normalizer.normalize(root)
        assert _labels(result) == ["ontem_ADV", "de_PRP", "np", "."]

    def test_nested_wrappers_collapse(self, normalizer: WrapperNormalizer) -> None:
        root = _tree(
            ("SENTENCE", [("fcl", [("vp", [("pp", [("de_PRP", [])])]), ("x_N", [])])])
        )
        result = normalizer.normalize(root)
        assert _labels(result) == ["de_PRP", "x_N"]

    def test_wrapper_inside_np_is_spliced(
        self, normalizer: WrapperNormalizer, livro: Any
    ) -> None:
        root = TreeBuilder().build(livro.block)
        result = normalizer.normalize(root)
        subject = result.children[0]
        assert _labels(subject) == ["O_ART", "livro_N", "de_PRP", "np"]

    def test_np_is_not_transparent(self, normalizer: WrapperNormalizer) -> None:
        assert not normalizer.is_transparent(TreeNode("np", 1))

    @pytest.mark.parametrize("label", ["fcl", "icl", "acl", "cu", "pp", "vp", "adjp"])
    def test_default_transparent_forms(
        self, normalizer: WrapperNormalizer, label: str
    ) -> None:
        assert normalizer.is_transparent(TreeNode(label, 1))

    def test_partial_label_is_not_transparent(
        self, normalizer: WrapperNormalizer
    ) -> None:
        assert not normalizer.is_transparent(TreeNode("fclx", 1))
        assert not normalizer.is_transparent(TreeNode("pp_N", 1))

    def test_custom_transparent_forms(self) -> None:
        normalizer = WrapperNormalizer("grp")
        root = _tree(("SENTENCE", [("grp", [("a", [])]), ("fcl", [("b", [])])]))
        result = normalizer.normalize(root)
        assert _labels(result) == ["a", "fcl"]


class TestRoot:
    def test_root_is_never_spliced(self) -> None:
        normalizer = WrapperNormalizer("SENTENCE|fcl")
        root = _tree(("SENTENCE", [("a", [])]))
        result = normalizer.normalize(root)
        assert result.label == "SENTENCE"
        assert _labels(result) == ["a"]

    def test_root_keeps_source_text(self, normalizer: WrapperNormalizer) -> None:
        root = TreeNode("SENTENCE", 0, source_text="STA:fcl")
        assert normalizer.normalize(root).source_text == "STA:fcl"


class TestPurity:
    def test_input_tree_is_untouched(
        self, normalizer: WrapperNormalizer, livro: Any
    ) -> None:
        root = TreeBuilder().build(livro.block)
        before = [(n.label, n.level) for n in _nodes(root)]
        normalizer.normalize(root)
        assert [(n.label, n.level) for n in _nodes(root)] == before

    def test_result_shares_no_nodes(
        self, normalizer: WrapperNormalizer, casa: Any
    ) -> None:
        root = TreeBuilder().build(casa.block)
        original = {id(node) for node in _nodes(root)}
        result = normalizer.normalize(root)
        assert not original & {id(node) for node in _nodes(result)}

    def test_parents_point_into_new_tree(
        self, normalizer: WrapperNormalizer, livro: Any
    ) -> None:
        result = normalizer.normalize(TreeBuilder().build(livro.block))
        for node in _nodes(result):
            for child in node.children:
                assert child.parent is node

    def test_leaf_order_is_preserved(
        self, normalizer: WrapperNormalizer, livro: Any
    ) -> None:
        root = TreeBuilder().build(livro.block)
        leaves = [n.label for n in _nodes(root) if n.is_leaf]
        result = normalizer.normalize(root)
        kept = [n.label for n in _nodes(result) if n.is_leaf]
        assert kept == leaves


class TestIdempotence:
    def test_normalize_twice(self, normalizer: WrapperNormalizer, livro: Any) -> None:
        once = normalizer.normalize(TreeBuilder().build(livro.block))
        twice = normalizer.normalize(once)
        assert _same_structure(once, twice)

    def test_no_wrappers_remain(
        self, normalizer: WrapperNormalizer, livro: Any
    ) -> None:
        result = normalizer.normalize(TreeBuilder().build(livro.block))
        assert not any(normalizer.is_transparent(n) for n in _nodes(result))
