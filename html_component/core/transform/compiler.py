"""Main component compiler: markup module in, component module out."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional

from .components import ComponentReference, resolve_components
from .config import TransformConfig
from .lookup import FileSystemLookup, NameLookup, PathLike
from .render import make_renderer, render_import
from .styles import StyleBinding, bind_style
from .syntax import SourceTree, imported_names, parse_source
from .wrapper import find_root_expression

DependencyCallback = Callable[[Path], None]


@dataclass
class TransformResult:
    """Result of transforming one module.

    Attributes
    ----------
    code : str
        Generated component module
    dependencies : List[Path]
        Files the output depends on: the module itself, then components
    components : List[ComponentReference]
        Resolved components, in first-visit order
    style : StyleBinding, optional
        Sibling style file, if one was found
    """

    code: str
    dependencies: List[Path] = field(default_factory=list)
    components: List[ComponentReference] = field(default_factory=list)
    style: Optional[StyleBinding] = None


@dataclass
class TransformOutcome:
    """Exactly one of ``code`` or ``error`` is set."""

    code: Optional[str] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ComponentCompiler:
    """Compiles markup modules into importable component modules.

    Parameters
    ----------
    config : TransformConfig, optional
        Transform configuration. If None, uses defaults.
    lookup : NameLookup, optional
        File resolution capability. If None, probes the real filesystem.
    logger : logging.Logger, optional
        Logger instance. If None, creates default logger.

    Example
    -------
    >>> compiler = ComponentCompiler()
    >>> result = compiler.transform(source, "src/pages", "src/pages/home.html")
    >>> print(result.code)
    """

    def __init__(
        self,
        config: Optional[TransformConfig] = None,
        lookup: Optional[NameLookup] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.config = config or TransformConfig()
        self.lookup = lookup or FileSystemLookup()
        self.logger = logger or logging.getLogger(__name__)

    def transform(
        self,
        source: str,
        context: PathLike,
        resource_path: Optional[PathLike] = None,
        add_dependency: Optional[DependencyCallback] = None,
    ) -> TransformResult:
        """
        Transform one module.

        Args:
            source: Module source text
            context: Directory of the module, first component search root
            resource_path: Path of the module; enables the style binding and
                the self-dependency
            add_dependency: Called with every dependency as it is recorded

        Raises TransformError subclasses on parse, resolution, style or
        root-expression failures. No output is produced on failure.
        """
        dependencies: List[Path] = []

        def record(path: Path) -> None:
            dependencies.append(path)
            if add_dependency is not None:
                add_dependency(path)

        style = None
        if resource_path is not None:
            record(Path(resource_path))

        tree = parse_source(source)

        if resource_path is not None:
            style = bind_style(context, resource_path, self.lookup, self.config)

        components = resolve_components(
            tree, context, self.lookup, self.config, add_dependency=record
        )
        root = find_root_expression(tree)
        if root is None:
            self.logger.debug("No root markup expression in %s", resource_path)

        body = make_renderer(tree, self.config, root).render()
        code = self._assemble(tree, body, components, style)

        self.logger.info(
            "Compiled %s (%d component(s), style: %s)",
            resource_path or "<source>",
            len(components),
            "yes" if style else "no",
        )
        return TransformResult(
            code=code, dependencies=dependencies, components=components, style=style
        )

    def _assemble(
        self,
        tree: SourceTree,
        body: str,
        components: List[ComponentReference],
        style: Optional[StyleBinding],
    ) -> str:
        """Prepend imports: framework, components (reversed), style."""
        declared = imported_names(tree)
        imports = []

        if self.config.framework_name not in declared:
            imports.append(
                render_import(self.config.framework_name, self.config.framework_module)
            )
        for reference in reversed(components):
            if reference.name not in declared:
                imports.append(render_import(reference.name, str(reference.path)))
        if style is not None and style.identifier not in declared:
            imports.append(render_import(style.identifier, str(style.path)))

        if not imports:
            return body
        return "\n".join(imports) + "\n" + body

    def compile_file(
        self, input_path: Path, output_path: Optional[Path] = None
    ) -> TransformResult:
        """Load, transform, and optionally save a module."""
        input_path = Path(input_path).resolve()
        source = input_path.read_text(encoding="utf-8")

        result = self.transform(source, input_path.parent, input_path)

        if output_path is not None:
            output_path = Path(output_path)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(result.code, encoding="utf-8")
            self.logger.info("Compiled %s -> %s", input_path, output_path)

        return result


def transform_module(
    source: str,
    context: PathLike,
    resource_path: Optional[PathLike] = None,
    add_dependency: Optional[DependencyCallback] = None,
    config: Optional[TransformConfig] = None,
    lookup: Optional[NameLookup] = None,
    logger: Optional[logging.Logger] = None,
) -> TransformOutcome:
    """
    Transform one module and report a single outcome.

    Any exception raised while transforming becomes the outcome's error;
    nothing propagates to the caller.
    """
    compiler = ComponentCompiler(config, lookup, logger)
    try:
        result = compiler.transform(source, context, resource_path, add_dependency)
    except Exception as e:
        compiler.logger.error(
            "Transform failed for %s: %s", resource_path or "<source>", e
        )
        return TransformOutcome(error=e)
    return TransformOutcome(code=result.code)


def transform_source(
    source: str,
    context: PathLike,
    resource_path: Optional[PathLike] = None,
    **config_kwargs,
) -> str:
    """Convenience function to transform module text."""
    config = TransformConfig(**config_kwargs)
    compiler = ComponentCompiler(config)
    return compiler.transform(source, context, resource_path).code
