"""credolint CLI - credolint command."""

import click

from credolint import __version__
from credolint.cli.lint import files_command, lint_command
from credolint.core.logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="credolint")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """credolint - Credo diagnostics for Elixir documents."""
    configure_logging(level="DEBUG" if verbose else "WARNING")


cli.add_command(lint_command, name="lint")
cli.add_command(files_command, name="files")


if __name__ == "__main__":
    cli()
