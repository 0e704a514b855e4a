"""Test fixtures for html-component-compiler.

Provides sample markup modules and project tree builders.
"""

from .modules import (
    BUTTON_COMPONENT,
    HEADER_COMPONENT,
    HOME_PAGE,
    PROJECT_FILES,
    SHARED_HEADER_COMPONENT,
    write_project,
)

__all__ = [
    "BUTTON_COMPONENT",
    "HEADER_COMPONENT",
    "HOME_PAGE",
    "PROJECT_FILES",
    "SHARED_HEADER_COMPONENT",
    "write_project",
]
