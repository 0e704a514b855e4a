"""Markup module to component module transform."""

from .compiler import (
    ComponentCompiler,
    TransformOutcome,
    TransformResult,
    transform_module,
    transform_source,
)
from .components import ComponentReference, find_component, resolve_components
from .config import TransformConfig
from .errors import (
    ComponentResolutionError,
    MultipleRootsError,
    ParseError,
    StyleAttributeError,
    TransformError,
)
from .lookup import FileSystemLookup, InMemoryLookup, NameLookup
from .normalizer import (
    Attribute,
    DynamicExpression,
    StringLiteral,
    normalize_attribute,
    parse_style,
    to_camel_case,
)
from .styles import StyleBinding, bind_style
from .syntax import SourceTree, parse_source
from .wrapper import RootExpression, find_root_expression

__all__ = [
    "TransformConfig",
    "ComponentCompiler",
    "TransformResult",
    "TransformOutcome",
    "transform_module",
    "transform_source",
    "SourceTree",
    "parse_source",
    "NameLookup",
    "FileSystemLookup",
    "InMemoryLookup",
    "Attribute",
    "StringLiteral",
    "DynamicExpression",
    "normalize_attribute",
    "parse_style",
    "to_camel_case",
    "StyleBinding",
    "bind_style",
    "ComponentReference",
    "find_component",
    "resolve_components",
    "RootExpression",
    "find_root_expression",
    "TransformError",
    "ParseError",
    "ComponentResolutionError",
    "StyleAttributeError",
    "MultipleRootsError",
]
