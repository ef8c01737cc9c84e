"""Parse Markdown source into the mdast-shaped node model."""

from __future__ import annotations

import re

from qspec2mdx.exceptions import ParseError
from qspec2mdx.schemas import (
    Code,
    ContainerDirective,
    Frontmatter,
    GenericNode,
    Heading,
    InlineCode,
    ListItem,
    ListNode,
    Node,
    Paragraph,
    Root,
    Text,
)

try:
    from markdown_it import MarkdownIt
    from markdown_it.tree import SyntaxTreeNode
    from mdit_py_plugins.container import container_plugin
    from mdit_py_plugins.front_matter import front_matter_plugin
    from mdit_py_plugins.tasklists import tasklists_plugin
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "markdown-it-py and mdit-py-plugins are required for Markdown parsing "
        "(pip install markdown-it-py mdit-py-plugins)."
    ) from exc


_DIRECTIVE_RE = re.compile(
    r"^(?P<name>[A-Za-z][\w-]*)"
    r"(?:\[(?P<label>[^\]]*)\])?"
    r"(?:\{(?P<attrs>[^}]*)\})?\s*$"
)
_DIRECTIVE_ATTR_RE = re.compile(r"""([#.]?[\w-]+)(?:=("[^"]*"|'[^']*'|[^\s"']+))?""")

_CONTAINER_NAME = "directive"
_TASK_CHECKBOX_PREFIX = '<input class="task-list-item-checkbox"'
_TABLE_ALIGN_RE = re.compile(r"text-align:\s*(left|right|center)")


def _validate_directive(params: str, *_args: object) -> bool:
    return _DIRECTIVE_RE.match(params.strip()) is not None


def create_markdown_parser() -> MarkdownIt:
    """CommonMark parser with GFM tables, strikethrough and task lists, front
    matter and ``:::`` container directives."""
    return (
        MarkdownIt("commonmark")
        .enable(["table", "strikethrough"])
        .use(tasklists_plugin)
        .use(front_matter_plugin)
        .use(container_plugin, name=_CONTAINER_NAME, marker=":", validate=_validate_directive)
    )


def parse_markdown(text: str, parser: MarkdownIt | None = None) -> Root:
    """Parse Markdown source into a :class:`Root` tree.

    Raises:
        ParseError: If ``text`` is not a string.
    """
    if not isinstance(text, str):
        raise ParseError(f"Markdown source must be a string, got {type(text).__name__}")
    md = parser or create_markdown_parser()
    syntax_tree = SyntaxTreeNode(md.parse(text))
    return Root(children=_convert_blocks(syntax_tree.children))


def parse_directive_params(params: str) -> tuple[str, str | None, dict[str, str] | None]:
    """Split ``name[label]{attrs}`` into its parts."""
    match = _DIRECTIVE_RE.match(params.strip())
    if not match:
        raise ParseError(f"Invalid directive: {params!r}")
    attrs_source = match.group("attrs")
    attributes = _parse_directive_attributes(attrs_source) if attrs_source is not None else None
    return match.group("name"), match.group("label"), attributes


def _parse_directive_attributes(source: str) -> dict[str, str]:
    attributes: dict[str, str] = {}
    classes: list[str] = []
    for key, raw_value in _DIRECTIVE_ATTR_RE.findall(source):
        if key.startswith("#"):
            attributes["id"] = key[1:]
        elif key.startswith("."):
            classes.append(key[1:])
        else:
            attributes[key] = raw_value.strip("\"'") if raw_value else ""
    if classes:
        attributes["class"] = " ".join(classes)
    return attributes


def _convert_blocks(nodes: list[SyntaxTreeNode]) -> list[Node]:
    return [_convert_block(node) for node in nodes]


def _convert_block(node: SyntaxTreeNode) -> Node:
    if node.type == "front_matter":
        return Frontmatter(type="yaml", value=node.content.rstrip("\n"))

    if node.type == "heading":
        return Heading(depth=int(node.tag[1]), children=_inline_children(node))

    if node.type == "paragraph":
        return Paragraph(children=_inline_children(node))

    if node.type == "fence":
        info = (node.info or "").strip()
        lang, _, meta = info.partition(" ")
        return Code(
            value=_strip_final_newline(node.content),
            lang=lang or None,
            meta=meta.strip() or None,
        )

    if node.type == "code_block":
        return Code(value=_strip_final_newline(node.content))

    if node.type in {"bullet_list", "ordered_list"}:
        items = [_convert_list_item(child) for child in node.children]
        extra: dict[str, int] = {}
        if node.type == "ordered_list":
            extra["start"] = int(node.attrs.get("start", 1))
        return ListNode(
            ordered=node.type == "ordered_list",
            spread=any(item.spread for item in items),
            children=items,
            **extra,
        )

    if node.type == f"container_{_CONTAINER_NAME}":
        name, label, attributes = parse_directive_params(node.info or "")
        return ContainerDirective(
            name=name,
            label=label,
            attributes=attributes,
            children=_convert_blocks(node.children),
        )

    if node.type == "table":
        return _convert_table(node)

    if node.type == "blockquote":
        return GenericNode(type="blockquote", children=_convert_blocks(node.children))

    if node.type == "hr":
        return GenericNode(type="thematicBreak")

    if node.type == "html_block":
        return GenericNode(type="html", value=_strip_final_newline(node.content))

    return GenericNode(type=node.type, children=_convert_blocks(node.children) or None)


def _convert_list_item(node: SyntaxTreeNode) -> ListItem:
    paragraphs = [child for child in node.children if child.type == "paragraph"]
    spread = any(not child.hidden for child in paragraphs)
    children = _convert_blocks(node.children)
    return ListItem(spread=spread, checked=_pop_task_checkbox(children), children=children)


def _pop_task_checkbox(children: list[Node]) -> bool | None:
    """Remove the task list checkbox from an item's first paragraph.

    Returns the checked state, or None when the item is not a task.
    """
    if not children or not isinstance(children[0], Paragraph):
        return None
    inlines = children[0].children
    first = inlines[0] if inlines else None
    if not (
        isinstance(first, GenericNode)
        and first.type == "html"
        and isinstance(first.value, str)
        and first.value.startswith(_TASK_CHECKBOX_PREFIX)
    ):
        return None
    del inlines[0]
    if inlines and isinstance(inlines[0], Text):
        inlines[0].value = inlines[0].value.lstrip()
    return 'checked="checked"' in first.value


def _convert_table(node: SyntaxTreeNode) -> GenericNode:
    rows: list[GenericNode] = []
    align: list[str | None] = []
    for section in node.children:
        for row in section.children:
            cells = [
                GenericNode(type="tableCell", children=_inline_children(cell))
                for cell in row.children
            ]
            if section.type == "thead":
                align = [_cell_align(cell) for cell in row.children]
            rows.append(GenericNode(type="tableRow", children=cells))
    return GenericNode(type="table", align=align, children=rows)


def _cell_align(cell: SyntaxTreeNode) -> str | None:
    match = _TABLE_ALIGN_RE.search(str(cell.attrs.get("style", "")))
    return match.group(1) if match else None


def _inline_children(block: SyntaxTreeNode) -> list[Node]:
    inlines: list[Node] = []
    for child in block.children:
        if child.type == "inline":
            inlines.extend(_convert_inlines(child.children))
    return inlines


def _convert_inlines(nodes: list[SyntaxTreeNode]) -> list[Node]:
    converted: list[Node] = []
    for node in nodes:
        inline = _convert_inline(node)
        if isinstance(inline, Text) and converted and isinstance(converted[-1], Text):
            converted[-1].value += inline.value
            continue
        converted.append(inline)
    return converted


def _convert_inline(node: SyntaxTreeNode) -> Node:
    if node.type in {"text", "text_special"}:
        return Text(value=node.content)

    if node.type == "softbreak":
        return Text(value="\n")

    if node.type == "hardbreak":
        return GenericNode(type="break")

    if node.type == "code_inline":
        return InlineCode(value=node.content)

    if node.type == "em":
        return GenericNode(type="emphasis", children=_convert_inlines(node.children))

    if node.type == "strong":
        return GenericNode(type="strong", children=_convert_inlines(node.children))

    if node.type == "s":
        return GenericNode(type="delete", children=_convert_inlines(node.children))

    if node.type == "link":
        return GenericNode(
            type="link",
            url=str(node.attrs.get("href", "")),
            title=node.attrs.get("title"),
            children=_convert_inlines(node.children),
        )

    if node.type == "image":
        return GenericNode(
            type="image",
            url=str(node.attrs.get("src", "")),
            alt=node.content,
            title=node.attrs.get("title"),
        )

    if node.type == "html_inline":
        return GenericNode(type="html", value=node.content)

    return GenericNode(type=node.type, value=node.content or None)


def _strip_final_newline(value: str) -> str:
    return value[:-1] if value.endswith("\n") else value
