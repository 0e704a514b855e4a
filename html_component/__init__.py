"""html-component-compiler: markup modules to importable React components.

This package provides tools for:
- Normalizing HTML attribute spelling (class, for, style, hyphenated names)
- Resolving capitalized elements to component files and importing them
- Binding a module to its sibling style file
- Wrapping the root markup expression into an exported component factory

Example usage:
    >>> from html_component.core.transform import ComponentCompiler
    >>>
    >>> compiler = ComponentCompiler()
    >>> result = compiler.compile_file(Path("src/pages/home.html"))
    >>> print(result.code)
"""

__version__ = "0.1.0"
