"""Re-emission of a module with its markup rewritten.

Both renderers rebuild the module text from the original source, splicing
rewritten fragments in place of the nodes they replace:

- ``MarkupRenderer`` keeps JSX and only rewrites attributes;
- ``CreateElementRenderer`` lowers every element to
  ``React.createElement(type, props, ...children)`` calls.
"""

import html
import re
from typing import List, Optional

from tree_sitter import Node

from .config import TransformConfig
from .normalizer import (
    AttributeValue,
    StringLiteral,
    js_string,
    normalize_attribute,
    object_key,
    read_attribute,
)
from .syntax import (
    ELEMENT_TYPES,
    SourceTree,
    attributes_of,
    contained_expression,
    element_children,
    opening_of,
    tag_name,
)
from .wrapper import RootExpression, wrap_export

_LINE_BREAK = re.compile(r"\r\n|\n|\r")
_NON_BLANK = re.compile(r"[^ \t]")


def render_import(local: str, source: str) -> str:
    return f"import {local} from {js_string(source)};"


def clean_jsx_text(text: str) -> str:
    """
    Collapse JSX text the way JSX compilers do.

    Lines are trimmed (except the outer edges of the first and last line),
    blank lines are dropped and the rest joined with a single space.
    """
    lines = _LINE_BREAK.split(html.unescape(text))
    last_non_blank = 0
    for i, line in enumerate(lines):
        if _NON_BLANK.search(line):
            last_non_blank = i

    result = ""
    for i, line in enumerate(lines):
        trimmed = line.replace("\t", " ")
        if i != 0:
            trimmed = trimmed.lstrip(" ")
        if i != len(lines) - 1:
            trimmed = trimmed.rstrip(" ")
        if trimmed:
            if i != last_non_blank:
                trimmed += " "
            result += trimmed
    return result


class ModuleRenderer:
    """Rebuilds module text, delegating node rewrites to ``rewrite``.

    Parameters
    ----------
    tree : SourceTree
        Parsed module
    config : TransformConfig
        Transform configuration
    root : RootExpression, optional
        Root markup statement to replace with the exported factory
    """

    def __init__(
        self,
        tree: SourceTree,
        config: TransformConfig,
        root: Optional[RootExpression] = None,
    ):
        self.tree = tree
        self.config = config
        self.root = root

    def render(self) -> str:
        """Render the whole module body."""
        node = self.tree.root
        return (
            self.tree.slice(0, node.start_byte)
            + self.splice(node)
            + self.tree.slice(node.end_byte, len(self.tree.source))
        )

    def splice(self, node: Node) -> str:
        """Source text of ``node`` with rewritten descendants spliced in."""
        if self.root is not None and node == self.root.statement:
            return wrap_export(self.splice(self.root.element), self.config)

        rewritten = self.rewrite(node)
        if rewritten is not None:
            return rewritten
        if not node.children:
            return self.tree.text(node)

        pieces: List[str] = []
        cursor = node.start_byte
        for child in node.children:
            pieces.append(self.tree.slice(cursor, child.start_byte))
            pieces.append(self.splice(child))
            cursor = child.end_byte
        pieces.append(self.tree.slice(cursor, node.end_byte))
        return "".join(pieces)

    def rewrite(self, node: Node) -> Optional[str]:
        """Return replacement text for a node, or None to keep it."""
        raise NotImplementedError


class MarkupRenderer(ModuleRenderer):
    """Keeps markup as JSX; attributes are normalized in place."""

    def rewrite(self, node: Node) -> Optional[str]:
        if node.type != "jsx_attribute":
            return None

        original = read_attribute(self.tree, node)
        attribute = normalize_attribute(original, self.config)
        if attribute.name == original.name and attribute.value is original.value:
            return None

        if attribute.value is None:
            return attribute.name
        return f"{attribute.name}={self._value(attribute.value)}"

    def _value(self, value: AttributeValue) -> str:
        if value.source is not None:
            return self.splice(value.source)
        if isinstance(value, StringLiteral):
            return "{" + js_string(value.value) + "}"
        return "{" + value.code + "}"


class CreateElementRenderer(ModuleRenderer):
    """Lowers markup to ``createElement`` calls on the framework object."""

    def rewrite(self, node: Node) -> Optional[str]:
        if node.type not in ELEMENT_TYPES:
            return None

        opening = opening_of(node)
        arguments = [self._element_type(opening), self._props(opening)]
        arguments.extend(self._children(node))
        return f"{self.config.framework_name}.createElement({', '.join(arguments)})"

    def _element_type(self, opening: Node) -> str:
        name_node = tag_name(opening)
        if name_node is None:
            return f"{self.config.framework_name}.Fragment"

        name = self.tree.text(name_node)
        if name_node.type == "jsx_namespace_name":
            return js_string(name)
        if name_node.type == "identifier" and (name[0].islower() or "-" in name):
            return js_string(name)
        return name

    def _props(self, opening: Node) -> str:
        entries = []
        for node in attributes_of(opening):
            if node.type != "jsx_attribute":
                entries.append(self._expression(node))
                continue
            attribute = normalize_attribute(
                read_attribute(self.tree, node), self.config
            )
            entries.append(f"{object_key(attribute.name)}: {self._value(attribute.value)}")

        if not entries:
            return "null"
        return "{ " + ", ".join(entries) + " }"

    def _value(self, value: Optional[AttributeValue]) -> str:
        if value is None:
            return "true"
        if isinstance(value, StringLiteral):
            return js_string(value.value)
        if value.source is not None:
            return self._expression(value.source)
        return value.code

    def _expression(self, node: Node) -> str:
        """Render an expression, unwrapping a ``{...}`` container."""
        if node.type == "jsx_expression":
            inner = contained_expression(node)
            return "undefined" if inner is None else self.splice(inner)
        return self.splice(node)

    def _children(self, element: Node) -> List[str]:
        if element.type != "jsx_element":
            return []

        result: List[str] = []
        cursor = element.children[0].end_byte
        for child in element_children(element):
            if child.type not in ELEMENT_TYPES and child.type != "jsx_expression":
                continue
            self._append_text(result, cursor, child.start_byte)
            cursor = child.end_byte
            if child.type == "jsx_expression":
                inner = contained_expression(child)
                if inner is not None:
                    result.append(self.splice(inner))
            else:
                result.append(self.splice(child))
        self._append_text(result, cursor, element.children[-1].start_byte)
        return result

    def _append_text(self, result: List[str], start: int, end: int) -> None:
        text = clean_jsx_text(self.tree.slice(start, end))
        if text:
            result.append(js_string(text))


def make_renderer(
    tree: SourceTree,
    config: TransformConfig,
    root: Optional[RootExpression] = None,
) -> ModuleRenderer:
    """Select the renderer for the configured JSX mode."""
    if config.jsx == "classic":
        return CreateElementRenderer(tree, config, root)
    return MarkupRenderer(tree, config, root)
