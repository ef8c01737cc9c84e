"""Tests for tree walking helpers."""

from __future__ import annotations

from qspec2mdx.schemas import Code, Text, parse_tree
from qspec2mdx.tree import iter_nodes, map_nodes, nodes_text, to_text


def _sample_tree():
    return parse_tree(
        {
            "type": "root",
            "children": [
                {
                    "type": "paragraph",
                    "children": [
                        {"type": "text", "value": "a"},
                        {"type": "emphasis", "children": [{"type": "text", "value": "b"}]},
                    ],
                },
                {"type": "code", "value": "c"},
                {"type": "thematicBreak"},
            ],
        }
    )


class TestIterNodes:
    """Tests for iter_nodes."""

    def test_depth_first_document_order(self) -> None:
        """Nodes are yielded parent first, then children in order."""
        types = [node.type for node in iter_nodes(_sample_tree())]
        assert types == [
            "root",
            "paragraph",
            "text",
            "emphasis",
            "text",
            "code",
            "thematicBreak",
        ]


class TestToText:
    """Tests for flattened text."""

    def test_concatenates_leaf_values(self) -> None:
        """All leaf values under a node are joined without separators."""
        tree = _sample_tree()
        assert to_text(tree.children[0]) == "ab"
        assert to_text(tree) == "abc"

    def test_nodes_without_text_flatten_to_empty(self) -> None:
        """Nodes with neither value nor children give an empty string."""
        assert to_text(_sample_tree().children[2]) == ""
        assert to_text(None) == ""

    def test_nodes_text_joins_with_newlines(self) -> None:
        """A node sequence is flattened one node per line."""
        assert nodes_text(_sample_tree().children) == "ab\nc\n"


class TestMapNodes:
    """Tests for copy-on-write rewriting."""

    def test_replaces_without_mutating_input(self) -> None:
        """The input tree keeps its shape; the result holds the replacements."""
        tree = _sample_tree()

        def _upper(node):
            if isinstance(node, Text):
                return Text(value=node.value.upper())
            return node

        result = map_nodes(tree, _upper)

        assert to_text(result) == "ABc"
        assert to_text(tree) == "abc"
        assert result is not tree

    def test_walk_continues_into_replacement(self) -> None:
        """Children of a replacement node are visited too."""
        tree = _sample_tree()
        seen: list[str] = []

        def _record(node):
            seen.append(node.type)
            if isinstance(node, Code):
                return Text(value="code")
            return node

        result = map_nodes(tree, _record)

        assert seen.count("text") == 2
        assert [child.type for child in result.children] == ["paragraph", "text", "thematicBreak"]
