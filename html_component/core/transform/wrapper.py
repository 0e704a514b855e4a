"""Root expression wrapping into an exported component factory."""

from dataclasses import dataclass
from typing import List, Optional

from tree_sitter import Node

from .config import TransformConfig
from .errors import MultipleRootsError
from .syntax import SourceTree, is_element, unwrap_parentheses


@dataclass
class RootExpression:
    """A top-level statement whose expression is a markup element."""

    statement: Node
    element: Node


def find_root_expressions(tree: SourceTree) -> List[RootExpression]:
    """Return every top-level markup expression statement, in order."""
    roots = []
    for statement in tree.root.named_children:
        if statement.type != "expression_statement" or not statement.named_children:
            continue
        expression = unwrap_parentheses(statement.named_children[0])
        if is_element(expression):
            roots.append(RootExpression(statement=statement, element=expression))
    return roots


def find_root_expression(tree: SourceTree) -> Optional[RootExpression]:
    """
    Return the module's root markup expression, or None if it has none.

    Raises MultipleRootsError when there is more than one, since each would
    become a default export of the same module.
    """
    roots = find_root_expressions(tree)
    if len(roots) > 1:
        raise MultipleRootsError(len(roots))
    return roots[0] if roots else None


def wrap_export(markup: str, config: Optional[TransformConfig] = None) -> str:
    """Render the exported factory function returning ``markup``."""
    config = config or TransformConfig()
    return (
        f"export default function {config.component_name}({config.props_name}) {{\n"
        f"  return {markup};\n"
        f"}}"
    )
