"""Logging utilities for html-component-compiler.

Provides timestamped file logging and YAML dependency manifests.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Optional, Tuple, Union

import yaml

PathLike = Union[str, Path]

CONSOLE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def get_timestamped_log_path(log_path: PathLike) -> Path:
    """Generate a timestamped log path from the base log path.

    Example: compile.log -> compile_20251209_080530.log

    Parameters
    ----------
    log_path : PathLike
        Base log file path.

    Returns
    -------
    Path
        Timestamped log path.
    """
    log_path = Path(log_path)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    suffix = log_path.suffix or ".log"
    return log_path.parent / f"{log_path.stem}_{timestamp}{suffix}"


def get_logger(
    name: str,
    log_path: PathLike,
    level: int = logging.INFO,
    timestamped: bool = False,
    console_level: Optional[int] = None,
) -> Tuple[logging.Logger, Path]:
    """Attach a file handler to the named logger.

    The logger stops propagating and its handlers are replaced, so the
    file level does not leak into the root console handler. Pass
    ``console_level`` to keep console output at its own level.

    Parameters
    ----------
    name : str
        Logger name (typically "html_component").
    log_path : PathLike
        Path for the log file.
    level : int
        Logging level (default: INFO).
    timestamped : bool
        If True, add timestamp to filename to preserve previous logs.
    console_level : int, optional
        If set, also log to stderr at this level.

    Returns
    -------
    Tuple[logging.Logger, Path]
        Tuple of (logger, actual_log_path).
    """
    actual_log_path = (
        get_timestamped_log_path(log_path) if timestamped else Path(log_path)
    )
    actual_log_path.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    handler = logging.FileHandler(actual_log_path, mode="a", encoding="utf-8")
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(handler)
    if console_level is not None:
        console = logging.StreamHandler()
        console.setLevel(console_level)
        console.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))
        logger.addHandler(console)
    return logger, actual_log_path


def log_yaml(log_path: PathLike, record: dict[str, Any]) -> Path:
    """Append a YAML document to log_path.

    Parameters
    ----------
    log_path : PathLike
        Path to the manifest file.
    record : dict
        Dictionary to serialize as YAML.

    Returns
    -------
    Path
        The manifest path.
    """
    path = Path(log_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    yaml_text = yaml.safe_dump(record, sort_keys=False).rstrip("\n")
    with path.open("a", encoding="utf-8") as handle:
        handle.write(yaml_text)
        handle.write("\n---\n")
    return path
