"""CLI utilities."""

from pathlib import Path

import click

PROJECT_MARKER = "mix.exs"


def find_project_root(start_path: Path | None = None) -> Path:
    """Find the Mix project root from the given path.

    Walks up the directory tree looking for a mix.exs file.
    If start_path is None, uses the current working directory.

    Raises:
        click.ClickException: If not inside a Mix project
    """
    if start_path is None:
        start_path = Path.cwd()

    current = start_path.resolve()
    if current.is_file():
        current = current.parent

    while True:
        if (current / PROJECT_MARKER).exists():
            return current
        if current == current.parent:
            break
        current = current.parent

    raise click.ClickException(
        f"Not inside a Mix project: {start_path}\n"
        "Pass the project root with --root, or run from a directory containing mix.exs."
    )
