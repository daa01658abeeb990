"""CLI entry point for mdinclude.

Invoked as::

    mdinclude [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m mdinclude.cli.main

Commands
--------
expand      Expand the includes of a Markdown file
check       Report includes that cannot be resolved
directives  List the include directives in a file
syntaxes    List registered directive syntaxes
version     Show version information
"""
from __future__ import annotations

import logging
import os
import sys
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

if TYPE_CHECKING:
    from mdinclude.resolver.expander import ExpansionResult
    from mdinclude.settings import IncludeSettings

console = Console()
err_console = Console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    """Route ``mdinclude`` log records to stderr through rich."""
    logger = logging.getLogger("mdinclude")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        logger.addHandler(RichHandler(console=err_console, show_path=False))


def _read_source(path: str) -> str:
    """Read a Markdown source file, exiting on error."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        err_console.print(f"[red]Error:[/red] File not found: {escape(path)}")
        sys.exit(1)
    except (OSError, UnicodeDecodeError) as exc:
        err_console.print(f"[red]Error:[/red] Cannot read {escape(path)}: {escape(str(exc))}")
        sys.exit(1)


def _settings_or_exit(file: str, config: str | None, **overrides: Any) -> "IncludeSettings":
    """Load settings from ``--config`` or next to ``file``, then apply CLI overrides."""
    from mdinclude.errors import SettingsError
    from mdinclude.settings import IncludeSettings, find_settings_file, load_settings

    config_path = Path(config) if config else find_settings_file(Path(file).resolve().parent)
    changes = {key: value for key, value in overrides.items() if value is not None}
    try:
        settings = load_settings(config_path) if config_path else IncludeSettings()
        return settings.replace(**changes) if changes else settings
    except SettingsError as exc:
        err_console.print(f"[red]Settings error:[/red] {escape(str(exc))}")
        sys.exit(1)


def _expand_or_exit(source: str, file: str, settings: "IncludeSettings") -> "ExpansionResult":
    """Expand ``source`` as the document at ``file``, exiting on fatal errors."""
    from mdinclude.errors import IncludeReadError, SettingsError
    from mdinclude.resolver import Expander

    try:
        return Expander(settings).expand_with_report(source, os.path.abspath(file))
    except IncludeReadError as exc:
        err_console.print(f"[red]Read error[/red] while expanding {escape(file)}: {escape(str(exc))}")
        sys.exit(1)
    except SettingsError as exc:
        err_console.print(f"[red]Settings error:[/red] {escape(str(exc))}")
        sys.exit(1)


def _settings_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the options shared by every command that expands a file."""
    options = [
        click.option("--config", "-c", default=None, help="Settings file (default: .mdinclude.yml next to FILE)"),
        click.option("--quote/--no-quote", default=None, help="Quote included content by default"),
        click.option("--commonmark/--no-commonmark", default=None, help="Enable :[label](file) directives"),
        click.option(
            "--markdown-it/--no-markdown-it",
            "markdown_it",
            default=None,
            help="Enable !!! include(file) !!! directives",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="mdinclude")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log every resolved include")
def cli(verbose: bool) -> None:
    """Recursive, cycle-safe file inclusion for Markdown."""
    _configure_logging(verbose)


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from mdinclude import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]mdinclude[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# syntaxes command
# ---------------------------------------------------------------------------


@cli.command(name="syntaxes")
def syntaxes_command() -> None:
    """List directive syntaxes, including those installed via entry-points."""
    from mdinclude.directives.syntax import SYNTAX_ENTRYPOINT_GROUP, syntax_registry

    syntax_registry.load_entrypoints(SYNTAX_ENTRYPOINT_GROUP)

    table = Table(title="Directive syntaxes")
    table.add_column("Name", style="bold")
    table.add_column("Class")
    table.add_column("Pattern", overflow="fold")
    for name in syntax_registry.list_plugins():
        cls = syntax_registry.get(name)
        table.add_row(name, f"{cls.__module__}.{cls.__qualname__}", escape(cls().pattern.pattern))
    console.print(table)


# ---------------------------------------------------------------------------
# expand command
# ---------------------------------------------------------------------------


@cli.command(name="expand")
@click.argument("file", type=click.Path(exists=False))
@_settings_options
@click.option("--output", "-o", default=None, help="Output file path (defaults to stdout)")
@click.option("--in-place", is_flag=True, default=False, help="Rewrite the file in place")
@click.option("--check", is_flag=True, default=False, help="Exit 1 if expansion would change the file")
@click.option("--pretty", is_flag=True, default=False, help="Highlight the output with line numbers")
def expand_command(
    file: str,
    config: str | None,
    quote: bool | None,
    commonmark: bool | None,
    markdown_it: bool | None,
    output: str | None,
    in_place: bool,
    check: bool,
    pretty: bool,
) -> None:
    """Expand the include directives of a Markdown file.

    FILE is the path to the Markdown document.

    Without --output, --in-place or --check, prints the expanded document
    to stdout.

    Examples:

    \b
        mdinclude expand README.src.md -o README.md
        mdinclude expand docs/guide.md --quote
        mdinclude expand docs/guide.md --check
    """
    source = _read_source(file)
    settings = _settings_or_exit(
        file,
        config,
        quote_formatting=quote,
        commonmark_regex=commonmark,
        markdown_it_regex=markdown_it,
    )
    result = _expand_or_exit(source, file, settings)

    if check:
        if result.text == source:
            console.print(f"[green]OK[/green] {escape(file)}: nothing to expand")
            sys.exit(0)
        console.print(f"[yellow]NEEDS EXPANSION[/yellow] {escape(file)}")
        sys.exit(1)
    elif in_place:
        Path(file).write_text(result.text, encoding="utf-8")
        console.print(f"[green]Expanded[/green] {escape(file)}")
    elif output:
        Path(output).write_text(result.text, encoding="utf-8")
        console.print(f"[green]Expanded document written to[/green] {escape(output)}")
    elif pretty:
        console.print(Syntax(result.text, "markdown", line_numbers=True))
    else:
        click.echo(result.text, nl=not result.text.endswith("\n"))

    for diagnostic in result.diagnostics:
        err_console.print(f"[yellow]Warning:[/yellow] {escape(str(diagnostic))}")


# ---------------------------------------------------------------------------
# check command
# ---------------------------------------------------------------------------


@cli.command(name="check")
@click.argument("file", type=click.Path(exists=False))
@_settings_options
def check_command(
    file: str,
    config: str | None,
    quote: bool | None,
    commonmark: bool | None,
    markdown_it: bool | None,
) -> None:
    """Report includes that are missing or circular.

    FILE is the path to the Markdown document to check.
    """
    from mdinclude.resolver import DiagnosticKind

    source = _read_source(file)
    settings = _settings_or_exit(
        file,
        config,
        quote_formatting=quote,
        commonmark_regex=commonmark,
        markdown_it_regex=markdown_it,
    )
    result = _expand_or_exit(source, file, settings)

    if not result.has_problems:
        console.print(f"[green]OK[/green] {escape(file)}: all includes resolve")
        sys.exit(0)

    table = Table(title=f"Include check: {escape(file)}", show_lines=True)
    table.add_column("Code", style="bold", min_width=8)
    table.add_column("Location", min_width=10)
    table.add_column("Directive")
    table.add_column("Message")
    for d in result.diagnostics:
        color = "red" if d.kind is DiagnosticKind.NOT_FOUND else "yellow"
        table.add_row(
            f"[{color}]{d.code}[/{color}]",
            escape(f"{d.parent}:{d.line}:{d.col}"),
            escape(d.directive),
            escape(d.message),
        )
    console.print(table)
    console.print(f"\n[bold]{len(result.diagnostics)}[/bold] unresolved include(s)")
    sys.exit(1)


# ---------------------------------------------------------------------------
# directives command
# ---------------------------------------------------------------------------


@cli.command(name="directives")
@click.argument("file", type=click.Path(exists=False))
@_settings_options
def directives_command(
    file: str,
    config: str | None,
    quote: bool | None,
    commonmark: bool | None,
    markdown_it: bool | None,
) -> None:
    """List the include directives in a file without resolving them.

    FILE is the path to the Markdown document.
    """
    from mdinclude.directives import DirectiveMatcher
    from mdinclude.errors import SettingsError
    from mdinclude.resolver.diagnostics import offset_to_position

    source = _read_source(file)
    settings = _settings_or_exit(
        file,
        config,
        quote_formatting=quote,
        commonmark_regex=commonmark,
        markdown_it_regex=markdown_it,
    )
    try:
        directives = DirectiveMatcher(settings).find_all(source)
    except SettingsError as exc:
        err_console.print(f"[red]Settings error:[/red] {escape(str(exc))}")
        sys.exit(1)

    if not directives:
        console.print(f"[yellow]No include directives[/yellow] in {escape(file)}")
        sys.exit(0)

    table = Table(title=f"Directives: {escape(file)}")
    table.add_column("Location", min_width=8)
    table.add_column("Syntax")
    table.add_column("Target", style="bold")
    table.add_column("Range")
    table.add_column("Quote")
    for directive in directives:
        line, col = offset_to_position(source, directive.offset)
        table.add_row(
            f"{line}:{col}",
            directive.syntax,
            escape(directive.target),
            escape(directive.range_text or "-"),
            directive.quote.value,
        )
    console.print(table)
    console.print(f"\n[bold]{len(directives)}[/bold] directive(s)")


if __name__ == "__main__":
    cli()
