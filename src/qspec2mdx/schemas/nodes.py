"""Syntax tree models for parsed Markdown (mdast-shaped)."""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    TypeAdapter,
    model_serializer,
)


class Node(BaseModel):
    """Base tree node.

    Unknown mdast fields (``position``, ``identifier``, ...) are kept as extras so
    they survive a validate/dump round trip.
    """

    model_config = ConfigDict(extra="allow")

    type: str
    data: dict[str, Any] | None = None


class LiteralNode(Node):
    """A leaf node holding a string value."""

    value: str = ""


class Parent(Node):
    """A node owning an ordered sequence of children."""

    children: list[AnyNode] = Field(default_factory=list)


class Root(Parent):
    type: Literal["root"] = "root"


class Heading(Parent):
    type: Literal["heading"] = "heading"
    depth: int = Field(..., ge=1, le=6)


class Paragraph(Parent):
    type: Literal["paragraph"] = "paragraph"


class Text(LiteralNode):
    type: Literal["text"] = "text"


class Code(LiteralNode):
    type: Literal["code"] = "code"
    lang: str | None = None
    meta: str | None = None


class InlineCode(LiteralNode):
    type: Literal["inlineCode"] = "inlineCode"


class Frontmatter(LiteralNode):
    """Metadata preamble (``---`` YAML or ``+++`` TOML)."""

    type: Literal["yaml", "toml"] = "yaml"


class ListNode(Parent):
    type: Literal["list"] = "list"
    ordered: bool | None = False
    spread: bool | None = False


class ListItem(Parent):
    """List entry; ``checked`` is set for task list items only."""

    type: Literal["listItem"] = "listItem"
    spread: bool | None = False
    checked: bool | None = None


class ContainerDirective(Parent):
    """Generic ``:::name[label]{attributes}`` block."""

    type: Literal["containerDirective"] = "containerDirective"
    name: str
    label: str | None = None
    attributes: dict[str, str] | None = None


class MdxJsxAttribute(BaseModel):
    """Attribute of a synthesized element; ``value=None`` marks a presence-only flag."""

    model_config = ConfigDict(extra="allow")

    type: Literal["mdxJsxAttribute"] = "mdxJsxAttribute"
    name: str
    value: str | None = None

    @model_serializer(mode="wrap")
    def _keep_presence_marker(self, handler: Any) -> dict[str, Any]:
        dumped = handler(self)
        dumped.setdefault("value", None)
        return dumped


class MdxJsxFlowElement(Parent):
    """Component invocation consumed by the renderer."""

    type: Literal["mdxJsxFlowElement"] = "mdxJsxFlowElement"
    name: str | None = None
    attributes: list[MdxJsxAttribute] = Field(default_factory=list)


class GenericNode(Node):
    """Any node type without a dedicated model; passed through unchanged."""

    value: Any = None
    children: list[AnyNode] | None = None


_TAGS = {
    "root": "root",
    "heading": "heading",
    "paragraph": "paragraph",
    "text": "text",
    "code": "code",
    "inlineCode": "inlineCode",
    "yaml": "frontmatter",
    "toml": "frontmatter",
    "list": "list",
    "listItem": "listItem",
    "containerDirective": "containerDirective",
    "mdxJsxFlowElement": "mdxJsxFlowElement",
}


def _node_tag(value: Any) -> str:
    if isinstance(value, GenericNode):
        return "generic"
    if isinstance(value, dict):
        node_type = value.get("type")
    else:
        node_type = getattr(value, "type", None)
    if not isinstance(node_type, str):
        return "generic"
    return _TAGS.get(node_type, "generic")


AnyNode = Annotated[
    Union[
        Annotated[Root, Tag("root")],
        Annotated[Heading, Tag("heading")],
        Annotated[Paragraph, Tag("paragraph")],
        Annotated[Text, Tag("text")],
        Annotated[Code, Tag("code")],
        Annotated[InlineCode, Tag("inlineCode")],
        Annotated[Frontmatter, Tag("frontmatter")],
        Annotated[ListNode, Tag("list")],
        Annotated[ListItem, Tag("listItem")],
        Annotated[ContainerDirective, Tag("containerDirective")],
        Annotated[MdxJsxFlowElement, Tag("mdxJsxFlowElement")],
        Annotated[GenericNode, Tag("generic")],
    ],
    Discriminator(_node_tag),
]

for _model in (
    Parent,
    Root,
    Heading,
    Paragraph,
    ListNode,
    ListItem,
    ContainerDirective,
    MdxJsxFlowElement,
    GenericNode,
):
    _model.model_rebuild()

_NODE_ADAPTER: TypeAdapter[Any] = TypeAdapter(AnyNode)


def parse_node(payload: dict[str, Any]) -> Node:
    """Validate a plain mdast dict into the matching node model."""
    return _NODE_ADAPTER.validate_python(payload)


def parse_tree(payload: dict[str, Any]) -> Root:
    """Validate a plain mdast ``root`` dict."""
    return Root.model_validate(payload)


def dump_tree(node: Node) -> dict[str, Any]:
    """Return the plain mdast dict for ``node``, omitting unset optional fields."""
    return node.model_dump(mode="json", exclude_none=True)
