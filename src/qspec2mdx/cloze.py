"""Fill-in-the-blank (cloze) marker substitution."""

from __future__ import annotations

from typing import Iterable

from qspec2mdx.schemas import Code, InlineCode, Node, Text
from qspec2mdx.tree import iter_all

ESCAPED_OPEN = "\\{{"
OPEN = "{{"
CLOSE = "}}"

_CLOZE_NODE_TYPES = (Text, Code, InlineCode)


def replace_cloze_markers(value: str) -> str:
    """Turn ``{{answer}}`` into ``${answer}`` and ``\\{{`` into a literal ``{{``.

    The inner text of a blank is one or more characters up to the first ``}``,
    which must be followed by a second ``}``. Anything else is copied through.
    """
    out: list[str] = []
    i = 0
    length = len(value)
    while i < length:
        if value.startswith(ESCAPED_OPEN, i):
            out.append(OPEN)
            i += len(ESCAPED_OPEN)
            continue
        if value.startswith(OPEN, i):
            start = i + len(OPEN)
            end = value.find("}", start)
            if end > start and value.startswith(CLOSE, end):
                inner = value[start:end].replace(ESCAPED_OPEN, OPEN)
                out.append("${" + inner + "}")
                i = end + len(CLOSE)
                continue
        out.append(value[i])
        i += 1
    return "".join(out)


def apply_cloze(nodes: Iterable[Node]) -> None:
    """Rewrite, in place, the value of every text, code and inline code node."""
    for node in iter_all(nodes):
        if isinstance(node, _CLOZE_NODE_TYPES):
            node.value = replace_cloze_markers(node.value)
