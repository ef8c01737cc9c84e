"""Custom exceptions for qspec2mdx."""


class Qspec2mdxError(Exception):
    """Base exception for qspec2mdx operations."""


class ConfigError(Qspec2mdxError):
    """Invalid configuration value."""


class ParseError(Qspec2mdxError):
    """Error while parsing Markdown source into a tree."""


class StructuralError(Qspec2mdxError):
    """A question spec document violates the required shape.

    Attributes:
        path: Source path of the offending document.
    """

    def __init__(self, message: str, path: str) -> None:
        super().__init__(f"{message}: {path}")
        self.path = path


class FrontmatterError(StructuralError):
    """Question spec opens with a front matter block."""


class MissingTitleError(StructuralError):
    """Question spec does not start with a level-1 heading."""


class EmptyTitleError(StructuralError):
    """Question spec title heading has no text."""


class MissingTypeError(StructuralError):
    """Question spec has no (or a blank) ``## Type`` section."""


class MissingPromptError(StructuralError):
    """Question spec has no (or an empty) ``## Prompt`` section."""
