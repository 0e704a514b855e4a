"""Component resolution for capitalized markup elements."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional

from .config import TransformConfig
from .errors import ComponentResolutionError
from .lookup import FileSystemLookup, NameLookup, PathLike
from .syntax import OPENING_TYPES, SourceTree, tag_name, walk

logger = logging.getLogger(__name__)


@dataclass
class ComponentReference:
    """A component tag and the file it resolved to."""

    name: str  # e.g., "Button"
    path: Path  # e.g., "/app/src/components/button.html"


def is_component_name(name: str) -> bool:
    return bool(name) and "A" <= name[0] <= "Z"


def component_candidates(
    name: str, context: PathLike, config: TransformConfig
) -> List[str]:
    """Candidate paths for a component, in search order."""
    filename = name.lower() + config.component_extension
    return [
        os.path.abspath(os.path.join(context, filename)),
        os.path.abspath(os.path.join(config.components_dir, filename)),
    ]


def find_component(
    name: str,
    context: PathLike,
    lookup: Optional[NameLookup] = None,
    config: Optional[TransformConfig] = None,
) -> Optional[Path]:
    """
    Resolve a component name to a file.

    Searches the module's own directory first, then the shared components
    directory (relative to the working directory, not to the module).
    """
    config = config or TransformConfig()
    lookup = lookup or FileSystemLookup()
    filename = name.lower() + config.component_extension

    for directory in (context, config.components_dir):
        path = lookup.resolve(directory, filename)
        if path is not None:
            return path
    return None


def resolve_components(
    tree: SourceTree,
    context: PathLike,
    lookup: Optional[NameLookup] = None,
    config: Optional[TransformConfig] = None,
    add_dependency: Optional[Callable[[Path], None]] = None,
) -> List[ComponentReference]:
    """
    Resolve every component element of a module, in document order.

    Raises ComponentResolutionError on the first name that resolves in
    neither search root.
    """
    config = config or TransformConfig()
    lookup = lookup or FileSystemLookup()

    references: List[ComponentReference] = []
    seen: set[str] = set()

    for node in walk(tree.root):
        if node.type not in OPENING_TYPES:
            continue
        name_node = tag_name(node)
        if name_node is None or name_node.type != "identifier":
            continue
        name = tree.text(name_node)
        if not is_component_name(name):
            continue
        if config.deduplicate_components and name in seen:
            continue

        path = find_component(name, context, lookup, config)
        if path is None:
            raise ComponentResolutionError(
                name, component_candidates(name, context, config)
            )

        logger.debug("Resolved component %s -> %s", name, path)
        seen.add(name)
        references.append(ComponentReference(name=name, path=path))
        if add_dependency is not None:
            add_dependency(path)

    return references
