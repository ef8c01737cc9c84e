"""Content pipeline: Markdown -> tree -> admonitions -> question spec exercise."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from qspec2mdx.admonitions import rewrite_admonitions
from qspec2mdx.config import normalize_path
from qspec2mdx.parser import parse_markdown
from qspec2mdx.question_spec import QuestionSpecOptions, compile_question_spec
from qspec2mdx.schemas import Root

logger = logging.getLogger(__name__)


@dataclass
class PipelineOptions:
    """Options for the content pipeline.

    Attributes:
        rewrite_admonitions: If True, rewrite admonition directives before
            compiling question specs.
        question_spec: Options for the question spec compiler.
    """

    rewrite_admonitions: bool = True
    question_spec: QuestionSpecOptions = field(default_factory=QuestionSpecOptions)


def process_tree(
    tree: Root, path: str | os.PathLike[str], options: PipelineOptions | None = None
) -> Root:
    """Run the rewrite passes over a parsed document.

    Args:
        tree: Parsed document tree. Treat it as superseded by the return value.
        path: Source path of the document, used for the question spec gate,
            heading id prefixes and error messages.
        options: Pipeline options. Uses defaults if None.

    Returns:
        The processed tree.

    Raises:
        StructuralError: If the document is a malformed question spec.
    """
    opts = options or PipelineOptions()
    file_path = normalize_path(path)

    if opts.rewrite_admonitions:
        tree = rewrite_admonitions(tree)

    result = compile_question_spec(tree, file_path, opts.question_spec)
    logger.debug("Processed %s", file_path)
    return result


def process_markdown(
    text: str, path: str | os.PathLike[str], options: PipelineOptions | None = None
) -> Root:
    """Parse Markdown source and run the rewrite passes over it."""
    return process_tree(parse_markdown(text), path, options)


def process_file(path: str | os.PathLike[str], options: PipelineOptions | None = None) -> Root:
    """Read a Markdown file (UTF-8) and run the pipeline over it."""
    source = Path(path)
    return process_markdown(source.read_text(encoding="utf-8"), source, options)
