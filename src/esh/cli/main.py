# src/esh/cli/main.py
import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from .. import __version__
from ..config import config
from ..errors import EshError
from ..lexer import Lexer

console = Console()
logger = logging.getLogger("esh.cli")

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _setup_logging():
    logging.basicConfig(
        level=config.effective_level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _read_source(file, code):
    """Return ``(source, name)`` from a file path or an inline snippet."""
    if code is not None:
        return code, "<string>"
    if file is None:
        raise click.UsageError("Provide a FILE or --code/-c.")
    try:
        with open(file, 'r', encoding='utf-8') as f:
            return f.read(), file
    except (OSError, UnicodeDecodeError) as e:
        raise EshError(f"cannot read source: {e}", filename=file) from e


@click.group()
@click.version_option(version=__version__, prog_name="esh")
@click.option('--debug', is_flag=True, default=False, help="Log every token as it is scanned.")
@click.option('--log-level', type=click.Choice(LOG_LEVELS, case_sensitive=False),
              envvar='ESH_LOG_LEVEL', default=None, help="Logging level (default WARNING).")
def cli(debug, log_level):
    """esh scanner - turn esh source into tokens"""
    if debug:
        config.enable_debug_logs = True
    if log_level:
        config.log_level = log_level.upper()
    _setup_logging()


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False), required=False)
@click.option('-c', '--code', default=None, help="Scan this snippet instead of a file.")
@click.option('--format', 'fmt', type=click.Choice(['table', 'plain']), default='table',
              show_default=True, help="Output style.")
def tokens(file, code, fmt):
    """Show the tokens of an esh file"""
    try:
        source_code, name = _read_source(file, code)
    except EshError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}", soft_wrap=True)
        sys.exit(1)

    logger.info("scanning %s", name)
    token_list = Lexer(source_code).tokenize()

    if fmt == 'plain':
        for token in token_list:
            click.echo(repr(token.kind))
        return

    table = Table(title=f"Tokens: {name}")
    table.add_column("Kind", style="cyan")
    table.add_column("Literal", style="green")
    table.add_column("Position", style="yellow", justify="right")
    for token in token_list:
        table.add_row(Text(repr(token.kind)), Text(token.literal), str(token.position))
    console.print(table)


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False), required=False)
@click.option('-c', '--code', default=None, help="Check this snippet instead of a file.")
def check(file, code):
    """Scan an esh file and report malformed input"""
    try:
        source_code, name = _read_source(file, code)
    except EshError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}", soft_wrap=True)
        sys.exit(1)

    lexer = Lexer(source_code)
    token_count = len(lexer.tokenize())

    for diagnostic in lexer.diagnostics:
        style = "red" if diagnostic.is_error else "yellow"
        console.print(Text(str(diagnostic), style=style))

    if any(d.is_error for d in lexer.diagnostics):
        console.print(f"[bold red]{escape(name)}: scan found errors[/bold red]")
        sys.exit(1)
    console.print(f"[bold green]{escape(name)}: {token_count} tokens, no errors[/bold green]")


@cli.command()
def repl():
    """Start an interactive token printer"""
    console.print(f"[bold green]esh scanner v{__version__}[/bold green]")
    console.print("Type 'exit' to quit\n")

    while True:
        try:
            line = console.input("[bold blue]>>> [/bold blue]")
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        if line.strip() in ['exit', 'quit']:
            break
        if not line.strip():
            continue

        for token in Lexer(line):
            console.print(Text(repr(token.kind), style="green"))


if __name__ == "__main__":
    cli()
