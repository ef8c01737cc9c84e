"""Shared schemas for qspec2mdx."""

from qspec2mdx.schemas.nodes import (
    AnyNode,
    Code,
    ContainerDirective,
    Frontmatter,
    GenericNode,
    Heading,
    InlineCode,
    ListItem,
    ListNode,
    LiteralNode,
    MdxJsxAttribute,
    MdxJsxFlowElement,
    Node,
    Paragraph,
    Parent,
    Root,
    Text,
    dump_tree,
    parse_node,
    parse_tree,
)
from qspec2mdx.schemas.scoring import ScoringItem

__all__ = [
    "AnyNode",
    "Code",
    "ContainerDirective",
    "Frontmatter",
    "GenericNode",
    "Heading",
    "InlineCode",
    "ListItem",
    "ListNode",
    "LiteralNode",
    "MdxJsxAttribute",
    "MdxJsxFlowElement",
    "Node",
    "Paragraph",
    "Parent",
    "Root",
    "ScoringItem",
    "Text",
    "dump_tree",
    "parse_node",
    "parse_tree",
]
