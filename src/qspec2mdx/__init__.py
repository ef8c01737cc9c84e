"""qspec2mdx: compile question spec Markdown into MDX exercise trees."""

from qspec2mdx.admonitions import rewrite_admonitions
from qspec2mdx.exceptions import (
    ConfigError,
    EmptyTitleError,
    FrontmatterError,
    MissingPromptError,
    MissingTitleError,
    MissingTypeError,
    ParseError,
    Qspec2mdxError,
    StructuralError,
)
from qspec2mdx.parser import parse_markdown
from qspec2mdx.pipeline import PipelineOptions, process_file, process_markdown, process_tree
from qspec2mdx.question_spec import (
    QuestionSpec,
    QuestionSpecOptions,
    compile_question_spec,
    parse_question_spec,
)
from qspec2mdx.schemas import Root, ScoringItem, dump_tree, parse_tree

__all__ = [
    "ConfigError",
    "EmptyTitleError",
    "FrontmatterError",
    "MissingPromptError",
    "MissingTitleError",
    "MissingTypeError",
    "ParseError",
    "PipelineOptions",
    "Qspec2mdxError",
    "QuestionSpec",
    "QuestionSpecOptions",
    "Root",
    "ScoringItem",
    "StructuralError",
    "compile_question_spec",
    "dump_tree",
    "parse_markdown",
    "parse_question_spec",
    "parse_tree",
    "process_file",
    "process_markdown",
    "process_tree",
    "rewrite_admonitions",
]
