"""Test setup for qspec2mdx."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Callable

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def _text(value: str) -> dict[str, Any]:
    return {"type": "text", "value": value}


def _heading(depth: int, text: str) -> dict[str, Any]:
    return {"type": "heading", "depth": depth, "children": [_text(text)]}


def _paragraph(text: str) -> dict[str, Any]:
    return {"type": "paragraph", "children": [_text(text)]}


@pytest.fixture
def heading() -> Callable[[int, str], dict[str, Any]]:
    """Factory for mdast heading dicts."""
    return _heading


@pytest.fixture
def paragraph() -> Callable[[str], dict[str, Any]]:
    """Factory for mdast paragraph dicts."""
    return _paragraph


@pytest.fixture
def spec_tree() -> Callable[..., dict[str, Any]]:
    """Factory for a question spec root dict built from ``(section, nodes)`` pairs."""

    def _build(title: str = "問題1（テスト）", **sections: list[dict[str, Any]]) -> dict[str, Any]:
        children = [_heading(1, title)]
        for name, nodes in sections.items():
            children.append(_heading(2, name))
            children.extend(nodes)
        return {"type": "root", "children": children}

    return _build
