"""Rewrite admonition directives (``:::tip`` ...) into ``<Admonition>`` elements."""

from __future__ import annotations

import logging
from typing import TypeVar

from qspec2mdx.config import ADMONITION_TYPES
from qspec2mdx.schemas import ContainerDirective, MdxJsxAttribute, MdxJsxFlowElement, Node
from qspec2mdx.tree import map_nodes

logger = logging.getLogger(__name__)

ADMONITION_ELEMENT = "Admonition"

NodeT = TypeVar("NodeT", bound=Node)


def is_admonition_directive(node: Node) -> bool:
    return isinstance(node, ContainerDirective) and node.name in ADMONITION_TYPES


def directive_to_admonition(directive: ContainerDirective) -> MdxJsxFlowElement:
    """Build the ``Admonition`` element replacing a recognized directive."""
    attributes = [MdxJsxAttribute(name="type", value=directive.name)]
    label = directive.label.strip() if isinstance(directive.label, str) else ""
    if label:
        attributes.append(MdxJsxAttribute(name="title", value=label))
    return MdxJsxFlowElement(
        name=ADMONITION_ELEMENT,
        attributes=attributes,
        children=list(directive.children or []),
        data=directive.data,
        **(directive.model_extra or {}),
    )


def rewrite_admonitions(tree: NodeT) -> NodeT:
    """Return a copy of ``tree`` with every admonition directive replaced.

    Only directives named exactly ``tip``, ``info``, ``note``, ``caution`` or
    ``danger`` are rewritten; every other node keeps its place unchanged.
    Directives nested inside a rewritten one are visited as well.
    """
    rewritten = 0

    def _rewrite(node: Node) -> Node:
        nonlocal rewritten
        if not is_admonition_directive(node):
            return node
        rewritten += 1
        return directive_to_admonition(node)  # type: ignore[arg-type]

    result = map_nodes(tree, _rewrite)
    logger.debug("Rewrote %s admonition directive(s)", rewritten)
    return result  # type: ignore[return-value]
