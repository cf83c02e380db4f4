"""
Click-based CLI for sqlrunner.

The CLI is a caller of the engine: it loads the script file, opens a SQLite
connection, runs the script and closes the connection again.
"""

import sqlite3
import sys
from pathlib import Path

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from . import __version__
from .core.config import DEFAULT_DELIMITER, RunnerConfig
from .domain.errors import SqlRunnerError
from .domain.results import ScriptRunResult
from .runner import ScriptRunner

console = Console()
err_console = Console(stderr=True)


@click.group()
@click.version_option(version=__version__, prog_name="sqlrunner")
def cli() -> None:
    """sqlrunner CLI for executing SQL scripts"""
    pass


@cli.command()
@click.argument("script", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--database",
    "-d",
    required=True,
    help="SQLite database file (':memory:' for a throwaway database)",
)
@click.option(
    "--delimiter",
    default=DEFAULT_DELIMITER,
    show_default=True,
    help="Statement delimiter the script starts with",
)
@click.option("--stop-on-error", is_flag=True, help="Abort on the first failing statement")
@click.option("--full-script", is_flag=True, help="Send the whole script as one statement")
@click.option(
    "--auto-commit/--no-auto-commit",
    default=None,
    help="Force auto-commit on the connection for the run",
)
@click.option(
    "--full-line-delimiter", is_flag=True, help="Delimiter must be alone on its line"
)
@click.option("--remove-crs", is_flag=True, help="Strip carriage returns from the script")
@click.option("--quiet", "-q", is_flag=True, help="Do not echo statements and results")
def run(
    script: Path,
    database: str,
    delimiter: str,
    stop_on_error: bool,
    full_script: bool,
    auto_commit: bool | None,
    full_line_delimiter: bool,
    remove_crs: bool,
    quiet: bool,
) -> None:
    """Run a SQL script against a SQLite database"""

    try:
        config = RunnerConfig(
            delimiter=delimiter,
            stop_on_error=stop_on_error,
            send_full_script=full_script,
            auto_commit=auto_commit,
            full_line_delimiter=full_line_delimiter,
            remove_crs=remove_crs,
        )
    except ValidationError as e:
        raise click.BadParameter(str(e.errors()[0]["msg"]), param_hint="--delimiter") from e

    connection = sqlite3.connect(database, autocommit=False)
    try:
        runner = ScriptRunner(
            connection,
            config,
            log_writer=None if quiet else sys.stdout,
            error_log_writer=sys.stderr,
        )
        with script.open(encoding="utf-8", newline="") as reader:
            result = runner.run_script(reader)
    except SqlRunnerError as e:
        err_console.print(f"[red]✗ Script failed ({e.code}):[/red] {escape(str(e))}", soft_wrap=True)
        sys.exit(1)
    finally:
        connection.close()

    _print_summary(script, result)


def _print_summary(script: Path, result: ScriptRunResult) -> None:
    summary = (
        f"{escape(script.name)}: {result.total_statements} statements "
        f"({result.successful_statements} succeeded, {result.failed_statements} failed)"
    )
    if result.status == "success":
        console.print(f"[green]✓[/green] {summary}", soft_wrap=True)
        return

    console.print(f"[yellow]⚠[/yellow] {summary}", soft_wrap=True)
    for index, statement in enumerate(result.statement_results, 1):
        if statement.status == "failed":
            message = escape(statement.error_message or "unknown error")
            console.print(f"  [red]✗[/red] Statement {index}: {message}", soft_wrap=True)
    sys.exit(1)


if __name__ == "__main__":
    cli()
