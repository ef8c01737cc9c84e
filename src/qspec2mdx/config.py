"""Local configuration for qspec2mdx."""

from __future__ import annotations

import os
from typing import Callable

from qspec2mdx.exceptions import ConfigError

DEFAULT_SPEC_SUFFIX = ".qspec.md"
DEFAULT_EXAM_MARKERS = "Exam,exam"
DEFAULT_EXAM_TIP_TITLE = "本試験では"
DEFAULT_SCORING_TITLE = "採点基準・配点"
ADMONITION_TYPES = frozenset({"tip", "info", "note", "caution", "danger"})

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be a boolean flag, got {raw!r}")


def _env_list(name: str, default: str) -> tuple[str, ...]:
    raw = os.getenv(name, default)
    return tuple(item.strip() for item in raw.split(",") if item.strip())


# Filename suffix identifying question spec documents.
QSPEC2MDX_SPEC_SUFFIX = os.getenv("QSPEC2MDX_SPEC_SUFFIX", DEFAULT_SPEC_SUFFIX)
# Directory name identifying question spec documents; overrides the suffix rule when set.
QSPEC2MDX_SPEC_DIR = os.getenv("QSPEC2MDX_SPEC_DIR") or None
QSPEC2MDX_EXAM_MARKERS = _env_list("QSPEC2MDX_EXAM_MARKERS", DEFAULT_EXAM_MARKERS)
QSPEC2MDX_SHARE_HEADING_COUNTER = _env_bool("QSPEC2MDX_SHARE_HEADING_COUNTER", False)


def normalize_path(path: str | os.PathLike[str] | None) -> str:
    """Return ``path`` as a string with forward slashes."""
    if path is None:
        return ""
    return os.fspath(path).replace("\\", "/")


def suffix_predicate(suffix: str) -> Callable[[str], bool]:
    """Build a gate matching paths that end with ``suffix``."""
    if not suffix:
        raise ConfigError("Question spec suffix must not be empty")

    def _matches(path: str) -> bool:
        return normalize_path(path).endswith(suffix)

    return _matches


def directory_predicate(dirname: str) -> Callable[[str], bool]:
    """Build a gate matching Markdown paths located under a ``dirname`` directory."""
    name = dirname.strip("/\\")
    if not name:
        raise ConfigError("Question spec directory must not be empty")
    marker = f"/{name}/"

    def _matches(path: str) -> bool:
        normalized = normalize_path(path)
        return marker in f"/{normalized}" and normalized.endswith(".md")

    return _matches


def default_applicability() -> Callable[[str], bool]:
    """Return the gate selected by the environment."""
    if QSPEC2MDX_SPEC_DIR:
        return directory_predicate(QSPEC2MDX_SPEC_DIR)
    return suffix_predicate(QSPEC2MDX_SPEC_SUFFIX)
