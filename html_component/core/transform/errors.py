"""Errors raised by the component transform."""

from typing import Sequence


class TransformError(Exception):
    """Base class for failures that abort a module transform."""

    pass


class ParseError(TransformError):
    """Raised when the source text cannot be parsed into a syntax tree."""

    def __init__(self, message: str, line: int, column: int):
        self.line = line
        self.column = column
        super().__init__(f"{message} (line {line}, column {column})")


class ComponentResolutionError(TransformError):
    """Raised when a capitalized element has no component file."""

    def __init__(self, name: str, candidates: Sequence[str] = ()):
        self.name = name
        self.candidates = list(candidates)
        message = f"Component not found: {name}"
        if self.candidates:
            message += " (searched " + ", ".join(self.candidates) + ")"
        super().__init__(message)


class StyleAttributeError(TransformError):
    """Raised when an inline style declaration is malformed."""

    def __init__(self, declaration: str):
        self.declaration = declaration
        super().__init__(f"Malformed style declaration: {declaration!r}")


class MultipleRootsError(TransformError):
    """Raised when a module has more than one root markup expression."""

    def __init__(self, count: int):
        self.count = count
        super().__init__(
            f"Expected one root markup expression, found {count}"
        )
