"""Configuration for the component transform."""

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict

import yaml

JSX_MODES = ("preserve", "classic")


@dataclass
class TransformConfig:
    """Configuration for the component transform.

    Attributes
    ----------
    framework_name : str
        Local name of the framework default import
    framework_module : str
        Module specifier of the framework import
    component_name : str
        Name of the exported factory function
    props_name : str
        Parameter name of the factory function (also the ``@token`` object)
    style_name : str
        Local name of the style import (also the ``$token`` object)
    component_extension : str
        Extension of component files
    style_extension : str
        Extension of the sibling style file
    components_dir : str
        Shared components directory, relative to the working directory
    jsx : str
        "preserve" keeps markup, "classic" lowers it to createElement calls
    deduplicate_components : bool
        Import and report each component name once
    exempt_data_aria_attributes : bool
        Keep hyphens in data-/aria- attribute names
    """

    framework_name: str = "React"
    framework_module: str = "react"
    component_name: str = "ReactStaticComponent"
    props_name: str = "props"
    style_name: str = "style"
    component_extension: str = ".html"
    style_extension: str = ".css"
    components_dir: str = "src/components"
    jsx: str = "preserve"
    deduplicate_components: bool = True
    exempt_data_aria_attributes: bool = False

    def __post_init__(self):
        if self.jsx not in JSX_MODES:
            raise ValueError(
                f"Unknown jsx mode '{self.jsx}', expected one of {JSX_MODES}"
            )

    @classmethod
    def from_yaml(cls, path: Path) -> "TransformConfig":
        """Load configuration from YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        # Handle nested transform section
        if "transform" in data:
            data = data["transform"] or {}

        return cls(**data)

    @classmethod
    def default(cls) -> "TransformConfig":
        """Create default configuration."""
        return cls()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)
