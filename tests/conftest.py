"""Pytest configuration and shared fixtures for html-component-compiler tests."""

import logging
import sys
from pathlib import Path

import pytest

# Add package to path
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from html_component.core.transform import InMemoryLookup
from tests.fixtures import write_project


# ============================================================================
# Project Fixtures
# ============================================================================


@pytest.fixture
def project(tmp_path: Path, monkeypatch) -> Path:
    """Create a sample project and make it the working directory.

    The shared components directory (src/components) is resolved against
    the working directory, so tests run from the project root.
    """
    write_project(tmp_path)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def pages_dir(project: Path) -> Path:
    """Directory holding the page modules."""
    return project / "src" / "pages"


@pytest.fixture
def memory_lookup(tmp_path: Path) -> InMemoryLookup:
    """In-memory lookup with two local and one shared component."""
    return InMemoryLookup(
        [
            tmp_path / "pages" / "foo.html",
            tmp_path / "pages" / "bar.html",
            tmp_path / "pages" / "index.css",
            "src/components/baz.html",
        ]
    )


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def sample_transform_config(tmp_path: Path) -> Path:
    """Create sample transform configuration file."""
    import yaml

    config = {
        "transform": {
            "framework_name": "Preact",
            "framework_module": "preact/compat",
            "component_name": "Page",
            "jsx": "classic",
            "components_dir": "ui/shared",
        }
    }

    path = tmp_path / "transform.yaml"
    with open(path, "w") as f:
        yaml.dump(config, f)

    return path


# ============================================================================
# Logging Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo handlers the CLI attaches to the package logger."""
    yield
    logger = logging.getLogger("html_component")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
