"""Tree walking and text helpers shared by the rewrite passes."""

from __future__ import annotations

from typing import Callable, Iterable, Iterator

from qspec2mdx.schemas import Heading, Node


def child_nodes(node: Node) -> list[Node]:
    """Return the children of ``node`` (empty for leaves)."""
    return getattr(node, "children", None) or []


def iter_nodes(node: Node) -> Iterator[Node]:
    """Yield ``node`` and all its descendants, depth-first and in document order."""
    yield node
    for child in child_nodes(node):
        yield from iter_nodes(child)


def iter_all(nodes: Iterable[Node]) -> Iterator[Node]:
    """Yield every node of a sequence and all their descendants."""
    for node in nodes:
        yield from iter_nodes(node)


def map_nodes(node: Node, fn: Callable[[Node], Node]) -> Node:
    """Rewrite a tree without touching the input.

    ``fn`` is called on each node before its children and returns the node to
    put in its place (possibly the node itself). The walk then continues into
    the children of the returned node.
    """
    replacement = fn(node)
    children = getattr(replacement, "children", None)
    if children is None:
        return replacement
    return replacement.model_copy(
        update={"children": [map_nodes(child, fn) for child in children]}
    )


def to_text(node: Node | None) -> str:
    """Concatenate every leaf value under ``node``."""
    if node is None:
        return ""
    value = getattr(node, "value", None)
    if isinstance(value, str):
        return value
    return "".join(to_text(child) for child in child_nodes(node))


def nodes_text(nodes: Iterable[Node]) -> str:
    """Flatten a node sequence to text, one node per line."""
    return "\n".join(to_text(node) for node in nodes)


def heading_text(node: Node) -> str:
    return to_text(node).strip()


def is_heading(node: Node | None, depth: int | None = None) -> bool:
    if not isinstance(node, Heading):
        return False
    return depth is None or node.depth == depth
