"""Syntax tree access for markup modules.

Parsing is delegated to tree-sitter with the JavaScript grammar, which
understands embedded JSX markup. Nodes are never mutated: rewrites are
rendered from the original source between node boundaries.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional

import tree_sitter_javascript
from tree_sitter import Language, Node, Parser, Tree

from .errors import ParseError

JAVASCRIPT = Language(tree_sitter_javascript.language())

ELEMENT_TYPES = frozenset({"jsx_element", "jsx_self_closing_element"})
OPENING_TYPES = frozenset({"jsx_opening_element", "jsx_self_closing_element"})


@dataclass
class SourceTree:
    """A parsed module: the source bytes and their syntax tree."""

    source: bytes
    tree: Tree

    @property
    def root(self) -> Node:
        return self.tree.root_node

    def text(self, node: Node) -> str:
        """Return the source text spanned by a node."""
        return self.slice(node.start_byte, node.end_byte)

    def slice(self, start: int, end: int) -> str:
        return self.source[start:end].decode("utf-8")


def parse_source(text: str) -> SourceTree:
    """
    Parse module source text.

    Raises ParseError at the first syntax error tree-sitter recovered from,
    since an error-recovered tree cannot be re-emitted faithfully.
    """
    source = text.encode("utf-8")
    tree = Parser(JAVASCRIPT).parse(source)

    error = _first_error(tree.root_node)
    if error is not None:
        line, column = error.start_point[0] + 1, error.start_point[1] + 1
        if error.is_missing:
            message = f"Missing '{error.type}'"
        else:
            snippet = source[error.start_byte:error.end_byte].decode(
                "utf-8", errors="replace"
            )
            message = f"Unexpected {snippet[:20]!r}"
        raise ParseError(message, line, column)

    return SourceTree(source=source, tree=tree)


def _first_error(node: Node) -> Optional[Node]:
    if node.type == "ERROR" or node.is_missing:
        return node
    for child in node.children:
        if child.has_error or child.is_missing:
            found = _first_error(child)
            if found is not None:
                return found
    return None


def walk(node: Node) -> Iterator[Node]:
    """Yield node and its descendants in document (pre-)order."""
    yield node
    for child in node.children:
        yield from walk(child)


def unwrap_parentheses(node: Node) -> Node:
    while node.type == "parenthesized_expression" and node.named_child_count == 1:
        node = node.named_children[0]
    return node


def is_element(node: Optional[Node]) -> bool:
    return node is not None and node.type in ELEMENT_TYPES


def opening_of(element: Node) -> Node:
    """Return the node holding the tag name and attributes of an element."""
    if element.type == "jsx_self_closing_element":
        return element
    return element.children[0]


def tag_name(opening: Node) -> Optional[Node]:
    """Return the tag name node of an opening element (None for fragments)."""
    return opening.child_by_field_name("name")


def attributes_of(opening: Node) -> List[Node]:
    """Return attribute nodes, including spread containers, in source order."""
    return [
        child
        for child in opening.named_children
        if child.type in ("jsx_attribute", "jsx_expression")
    ]


def element_children(element: Node) -> List[Node]:
    """Return the child nodes between the opening and closing tags."""
    if element.type == "jsx_self_closing_element":
        return []
    return element.children[1:-1]


def contained_expression(container: Node) -> Optional[Node]:
    """Return the expression inside a ``{...}`` container, if any."""
    for child in container.named_children:
        if child.type != "comment":
            return child
    return None


def imported_names(tree: SourceTree) -> set[str]:
    """Local names bound by the module's top-level import statements."""
    names: set[str] = set()
    for statement in tree.root.named_children:
        if statement.type != "import_statement":
            continue
        for node in walk(statement):
            if node.type == "import_specifier":
                local = node.child_by_field_name("alias") or node.child_by_field_name(
                    "name"
                )
                if local is not None:
                    names.add(tree.text(local))
            elif node.type == "identifier" and node.parent.type in (
                "import_clause",
                "namespace_import",
            ):
                names.add(tree.text(node))
    return names
