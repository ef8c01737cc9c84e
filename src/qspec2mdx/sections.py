"""Partition question spec bodies into named sections and parse their content."""

from __future__ import annotations

import re
from typing import Iterable, Sequence

from qspec2mdx.schemas import Node, ScoringItem
from qspec2mdx.tree import heading_text, is_heading, nodes_text

SECTION_DEPTH = 2
SUBSECTION_DEPTH = 3

_SCORING_LINE_RE = re.compile(r"^([0-9]+)\s*:\s*(.+)$")


def partition_sections(nodes: Iterable[Node]) -> dict[str, list[Node]]:
    """Group nodes under the level-2 heading that precedes them.

    Nodes before the first level-2 heading belong to no section and are dropped.
    A heading that appears again starts its section over.
    """
    sections: dict[str, list[Node]] = {}
    current: str | None = None
    for node in nodes:
        if is_heading(node, SECTION_DEPTH):
            current = heading_text(node)
            sections[current] = []
            continue
        if current is None:
            continue
        sections[current].append(node)
    return sections


def split_exam_tip(
    prompt: Sequence[Node], markers: Iterable[str]
) -> tuple[list[Node], list[Node]]:
    """Pull every marker subsection (level-3 heading plus its content) out of the prompt.

    Returns ``(prompt_nodes, exam_tip_nodes)``; the marker headings themselves
    are dropped.
    """
    marker_set = set(markers)
    remaining: list[Node] = []
    tip: list[Node] = []

    i = 0
    while i < len(prompt):
        node = prompt[i]
        if is_heading(node, SUBSECTION_DEPTH) and heading_text(node) in marker_set:
            i += 1
            while i < len(prompt) and not is_heading(prompt[i], SUBSECTION_DEPTH):
                tip.append(prompt[i])
                i += 1
            continue
        remaining.append(node)
        i += 1

    return remaining, tip


def parse_scoring(nodes: Iterable[Node]) -> list[ScoringItem]:
    """Parse ``<points>: <description>`` lines; anything else is ignored."""
    items: list[ScoringItem] = []
    for raw_line in nodes_text(nodes).split("\n"):
        line = raw_line.strip()
        if not line:
            continue
        match = _SCORING_LINE_RE.match(line)
        if not match:
            continue
        items.append(
            ScoringItem(points=int(match.group(1)), description=match.group(2).strip())
        )
    return items
