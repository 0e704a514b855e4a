"""Command-line interface for html-component-compiler.

Example Usage
-------------
    # From command line:
    html-component --help
    html-component compile src/pages/home.html -o build/home.js
    html-component deps src/pages/home.html
"""

from .main import cli, main

__all__ = [
    "cli",
    "main",
]
