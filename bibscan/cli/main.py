"""Main CLI entry point and application setup."""

import logging
from dataclasses import dataclass
from pathlib import Path

import click
from click.exceptions import Exit
from rich.console import Console
from rich.markup import escape

from bibscan import __version__
from bibscan.cli.formatters import (
    format_document_json,
    format_document_table,
    format_document_yaml,
    format_summary,
)
from bibscan.config import ParserConfig, load_config
from bibscan.core.exceptions import ParseError
from bibscan.core.models import Document
from bibscan.parsing import parse

logger = logging.getLogger(__name__)


@dataclass
class Context:
    """CLI context that holds shared resources."""

    console: Console
    config: ParserConfig
    debug: bool = False


def setup_logging(
    verbose: bool = False, quiet: bool = False, debug: bool = False
) -> None:
    """Configure logging based on CLI flags."""
    if quiet:
        level = logging.WARNING
    elif verbose or debug:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s"
        if not debug
        else "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def create_console(no_color: bool = False, width: int | None = None) -> Console:
    """Create Rich console with appropriate settings."""
    return Console(
        no_color=no_color,
        width=width or 120,
        highlight=not no_color,
        color_system=None if no_color else "auto",
    )


class BibScanGroup(click.Group):
    """Custom group that reports unexpected errors without a traceback."""

    def invoke(self, ctx):
        try:
            return super().invoke(ctx)
        except KeyboardInterrupt:
            console = getattr(ctx.obj, "console", None) if ctx.obj else None
            if console:
                console.print("[yellow]Interrupted[/yellow]")
            ctx.exit(130)
        except (click.ClickException, click.Abort, Exit, SystemExit):
            raise
        except Exception as e:
            debug = getattr(ctx.obj, "debug", False) if ctx.obj else False
            if debug:
                raise
            click.echo(f"Error: {e}", err=True)
            ctx.exit(1)


@click.group(cls=BibScanGroup)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-error output")
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option("--debug", is_flag=True, help="Enable debug mode with full tracebacks")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file",
)
@click.version_option(
    version=__version__, prog_name="bibscan", message="bibscan version %(version)s"
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    no_color: bool,
    debug: bool,
    config: Path | None,
) -> None:
    """BibTeX parsing tool.

    Parses BibTeX files into preambles, comments, string variables and
    bibliography entries with all variables resolved.
    """
    setup_logging(verbose=verbose, quiet=quiet, debug=debug)

    try:
        parser_config = load_config(config)
    except ValueError as e:
        if debug:
            raise
        click.echo(f"Error loading config file: {e}", err=True)
        ctx.exit(1)

    ctx.obj = Context(
        console=create_console(no_color=no_color),
        config=parser_config,
        debug=debug,
    )


def load_document(ctx: click.Context, source: Path) -> Document:
    """Read and parse ``source``, exiting with status 1 on a parse error."""
    text = source.read_text(encoding="utf-8")
    logger.debug("Read %d characters from %s", len(text), source)
    try:
        return parse(text, config=ctx.obj.config)
    except ParseError as e:
        if ctx.obj.debug:
            raise
        ctx.obj.console.print(
            f"[red]{escape(str(source))}:[/red] {escape(str(e))}", soft_wrap=True
        )
        ctx.exit(1)


@cli.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["table", "json", "yaml"]),
    default="table",
    help="Output format",
)
@click.pass_context
def show(ctx: click.Context, source: Path, output_format: str) -> None:
    """Parse a BibTeX file and print its contents."""
    document = load_document(ctx, source)
    console = ctx.obj.console

    if output_format == "json":
        click.echo(format_document_json(document))
    elif output_format == "yaml":
        click.echo(format_document_yaml(document), nl=False)
    else:
        console.print(format_document_table(document))


@cli.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def check(ctx: click.Context, source: Path) -> None:
    """Check that a BibTeX file parses, reporting the first error."""
    document = load_document(ctx, source)
    ctx.obj.console.print(
        f"[green]✓[/green] {escape(str(source))}: {format_summary(document)}",
        soft_wrap=True,
    )


def main() -> None:
    """Console script entry point."""
    cli()


if __name__ == "__main__":
    main()
