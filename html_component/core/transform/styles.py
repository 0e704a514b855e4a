"""Style binding: associate a module with its sibling style file."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .config import TransformConfig
from .lookup import FileSystemLookup, NameLookup, PathLike

logger = logging.getLogger(__name__)


@dataclass
class StyleBinding:
    """Resolved sibling style file and the name it is imported as."""

    path: Path
    identifier: str = "style"


def base_filename(resource_path: PathLike) -> str:
    """File name without its last extension ("card.html" -> "card")."""
    return Path(resource_path).stem


def bind_style(
    context: PathLike,
    resource_path: PathLike,
    lookup: Optional[NameLookup] = None,
    config: Optional[TransformConfig] = None,
) -> Optional[StyleBinding]:
    """Probe ``<context>/<base><style_extension>``; None when absent."""
    config = config or TransformConfig()
    lookup = lookup or FileSystemLookup()

    name = base_filename(resource_path) + config.style_extension
    path = lookup.resolve(context, name)
    if path is None:
        return None

    logger.debug("Bound style %s for %s", path, resource_path)
    return StyleBinding(path=path, identifier=config.style_name)
