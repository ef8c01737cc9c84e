"""Derive collision-free heading ids for compiled question content."""

from __future__ import annotations

import re
import unicodedata
from collections import Counter
from typing import Iterable

from qspec2mdx.config import normalize_path
from qspec2mdx.schemas import Heading, Node
from qspec2mdx.tree import heading_text, iter_all

FALLBACK_SLUG = "section"
FALLBACK_PREFIX = "question"
MIN_ID_DEPTH = 3

_WHITESPACE_RE = re.compile(r"\s+")


def _keep_slug_char(char: str) -> bool:
    if char in "_-":
        return True
    return unicodedata.category(char)[0] in "LN"


def slugify_heading(text: str) -> str:
    """Slug of a heading: whitespace runs become ``-``, only letters, numbers, ``_`` and ``-`` remain."""
    hyphenated = _WHITESPACE_RE.sub("-", text.strip())
    slug = "".join(char for char in hyphenated if _keep_slug_char(char))
    return slug or FALLBACK_SLUG


def id_prefix_for_path(path: str, suffix: str) -> str:
    """Per-document id prefix: the file name without its question spec or ``.md`` suffix."""
    base = normalize_path(path).rsplit("/", 1)[-1]
    for ending in (suffix, ".md"):
        if ending and base.endswith(ending):
            base = base[: -len(ending)]
            break
    return base or FALLBACK_PREFIX


def apply_heading_ids(
    nodes: Iterable[Node], prefix: str, counter: Counter[str] | None = None
) -> Counter[str]:
    """Attach ``data.hProperties.id`` to every heading of depth 3 or more.

    The first heading with a given id keeps it verbatim; the Nth repeat gets
    ``-N`` appended. Repeats are counted in ``counter``, a fresh one unless
    passed in. Returns the counter.
    """
    counts: Counter[str] = Counter() if counter is None else counter
    for node in iter_all(nodes):
        if not isinstance(node, Heading) or node.depth < MIN_ID_DEPTH:
            continue
        base_id = f"{prefix}-{slugify_heading(heading_text(node))}"
        seen = counts[base_id]
        counts[base_id] += 1
        heading_id = base_id if seen == 0 else f"{base_id}-{seen}"

        data = dict(node.data or {})
        data["hProperties"] = {**(data.get("hProperties") or {}), "id": heading_id}
        node.data = data
    return counts
