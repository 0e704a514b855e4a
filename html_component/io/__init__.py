"""I/O utilities for html-component-compiler.

Provides file logging and dependency manifest output.
"""

from .logging import get_logger, get_timestamped_log_path, log_yaml

__all__ = [
    "get_logger",
    "get_timestamped_log_path",
    "log_yaml",
]
