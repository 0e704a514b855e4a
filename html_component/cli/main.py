"""Command-line interface for html-component-compiler.

Provides CLI commands for compiling markup modules and listing their
dependencies.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import click

from html_component import __version__
from html_component.io.logging import CONSOLE_FORMAT


def console_level(verbose: bool = False, debug: bool = False) -> int:
    return logging.DEBUG if debug else (logging.INFO if verbose else logging.WARNING)


def setup_logging(verbose: bool = False, debug: bool = False) -> logging.Logger:
    """Setup logging for CLI commands."""
    logging.basicConfig(
        level=console_level(verbose, debug),
        format=CONSOLE_FORMAT,
        datefmt="%H:%M:%S",
    )
    return logging.getLogger("html_component")


def load_config(config: Optional[str], jsx: Optional[str] = None):
    """Build the transform configuration from a YAML file and CLI overrides."""
    from html_component.core.transform import TransformConfig

    cfg = TransformConfig.from_yaml(Path(config)) if config else TransformConfig()
    if jsx:
        cfg = TransformConfig(**{**cfg.to_dict(), "jsx": jsx})
    return cfg


@click.group()
@click.version_option(version=__version__, prog_name="html-component")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug output")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, debug: bool) -> None:
    """html-component: compile HTML markup modules into React components.

    Each module's root markup becomes a default-exported function
    component. Capitalized tags are resolved to sibling or shared
    component files and imported; a same-named .css file is imported
    as `style`.

    Examples:

        # Compile a module to stdout
        html-component compile src/pages/home.html

        # Compile to a file, lowering markup to createElement calls
        html-component compile src/pages/home.html -o build/home.js --jsx classic

        # List the files a module depends on
        html-component deps src/pages/home.html
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["logger"] = setup_logging(verbose, debug)


@cli.command()
@click.argument("input_path", metavar="INPUT", type=click.Path(exists=True, dir_okay=False))
@click.option("--out", "-o", "output_path", type=click.Path(dir_okay=False),
              help="Output file (default: stdout)")
@click.option("--config", "-c", type=click.Path(exists=True),
              help="Transform configuration file (YAML)")
@click.option("--jsx", type=click.Choice(["preserve", "classic"]),
              help="Keep markup or lower it to createElement calls")
@click.option("--manifest", type=click.Path(dir_okay=False),
              help="Append a YAML dependency manifest to this file")
@click.option("--log-file", type=click.Path(dir_okay=False),
              help="Also write logs to this file")
@click.pass_context
def compile(
    ctx: click.Context,
    input_path: str,
    output_path: Optional[str],
    config: Optional[str],
    jsx: Optional[str],
    manifest: Optional[str],
    log_file: Optional[str],
) -> None:
    """Compile one markup module into a component module."""
    logger = ctx.obj["logger"]

    from html_component.core.transform import ComponentCompiler, TransformError
    from html_component.io import get_logger, log_yaml

    if log_file:
        _, actual_log_path = get_logger(
            "html_component",
            log_file,
            level=logging.DEBUG,
            console_level=console_level(ctx.obj["verbose"], ctx.obj["debug"]),
        )
        logger.info(f"Logging to: {actual_log_path}")

    cfg = load_config(config, jsx)
    compiler = ComponentCompiler(cfg)

    try:
        result = compiler.compile_file(
            Path(input_path), Path(output_path) if output_path else None
        )
    except (TransformError, OSError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if manifest:
        log_yaml(
            manifest,
            {
                "module": str(Path(input_path).resolve()),
                "compiled_at": datetime.now().isoformat(timespec="seconds"),
                "dependencies": [str(path) for path in result.dependencies],
                "style": str(result.style.path) if result.style else None,
            },
        )
        logger.info(f"Manifest written to: {manifest}")

    if output_path:
        click.echo(f"Compiled {input_path} -> {output_path}")
    else:
        click.echo(result.code, nl=not result.code.endswith("\n"))


@cli.command()
@click.argument("input_path", metavar="INPUT", type=click.Path(exists=True, dir_okay=False))
@click.option("--config", "-c", type=click.Path(exists=True),
              help="Transform configuration file (YAML)")
@click.pass_context
def deps(ctx: click.Context, input_path: str, config: Optional[str]) -> None:
    """List the files a module's output depends on, one per line."""
    from html_component.core.transform import ComponentCompiler, TransformError

    compiler = ComponentCompiler(load_config(config))

    try:
        result = compiler.compile_file(Path(input_path))
    except (TransformError, OSError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    for path in result.dependencies:
        click.echo(str(path))


def main() -> None:
    """Main entry point for CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
