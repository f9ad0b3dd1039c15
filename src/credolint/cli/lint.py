"""credolint lint / files commands."""

import asyncio
import json
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from credolint.cli.utils import find_project_root
from credolint.config.loader import load_config
from credolint.core.errors import ConfigError, MalformedManifestError
from credolint.lint.collection import DiagnosticCollection
from credolint.lint.eligibility import EligibilityResolver
from credolint.lint.models import LintOutcome, LintSettings, Severity
from credolint.lint.ops import Document, LintOps

_SEVERITY_STYLES = {
    Severity.ERROR: "red",
    Severity.WARNING: "yellow",
    Severity.INFO: "cyan",
    Severity.HINT: "dim",
}

_root_option = click.option(
    "--root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Project root (default: nearest directory with mix.exs)",
)


def _resolve_settings(root: Path | None, strict: bool | None, anchor: Path) -> LintSettings:
    project_root = root.resolve() if root else find_project_root(anchor)
    overrides = {"linter": {"strict": strict}} if strict is not None else {}
    try:
        config = load_config(project_root, **overrides)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e
    return config.linter.to_settings(project_root)


def _display_path(path: Path, root: Path) -> Path:
    return path.relative_to(root) if path.is_relative_to(root) else path


async def _lint_documents(ops: LintOps, documents: list[Document]) -> list[LintOutcome]:
    return [await ops.lint_document(doc) for doc in documents]


def _outcome_to_dict(outcome: LintOutcome, path: Path) -> dict[str, object]:
    return {
        "path": str(path),
        "status": outcome.status,
        "diagnostics": [d.to_dict() for d in outcome.diagnostics],
        "dropped": outcome.stats.dropped if outcome.stats else 0,
        "error": outcome.error_detail,
    }


def _print_outcomes(outcomes: list[LintOutcome], documents: list[Document], root: Path) -> None:
    console = Console(highlight=False, soft_wrap=True)
    for outcome, doc in zip(outcomes, documents):
        shown = _display_path(doc.path, root)
        if outcome.status == "error":
            console.print(f"[red]✗[/red] {escape(str(shown))}: {escape(outcome.error_detail or '')}")
            continue
        if outcome.status == "ineligible":
            console.print(f"[dim]- {escape(str(shown))}: not part of the project, skipped[/dim]")
            continue
        for diag in outcome.diagnostics:
            style = _SEVERITY_STYLES[diag.severity]
            location = f"{shown}:{diag.range.start.line + 1}:{diag.range.end.character + 1}"
            console.print(
                f"{escape(location)} [{style}]{diag.severity.value}[/{style}] {escape(diag.message)}"
            )


@click.command()
@click.argument(
    "files",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@_root_option
@click.option("--strict/--no-strict", default=None, help="Run the linter in strict mode")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def lint_command(
    files: tuple[Path, ...], root: Path | None, strict: bool | None, as_json: bool
) -> None:
    """Lint FILES and print their diagnostics.

    Exits with status 1 when diagnostics were reported and 2 when the linter
    could not be run.
    """
    settings = _resolve_settings(root, strict, files[0])
    ops = LintOps(settings, DiagnosticCollection())
    documents = [Document.from_file(f, language_id=settings.language_id) for f in files]
    outcomes = asyncio.run(_lint_documents(ops, documents))

    if as_json:
        payload = [_outcome_to_dict(o, d.path) for o, d in zip(outcomes, documents)]
        click.echo(json.dumps(payload, indent=2))
    else:
        _print_outcomes(outcomes, documents, settings.working_root)

    if any(o.status == "error" for o in outcomes):
        raise SystemExit(2)
    if any(o.diagnostics for o in outcomes if o.published):
        raise SystemExit(1)


@click.command()
@_root_option
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def files_command(root: Path | None, as_json: bool) -> None:
    """List the files the linter considers part of the project."""
    settings = _resolve_settings(root, None, Path.cwd())
    resolver = EligibilityResolver(settings)
    try:
        manifest = asyncio.run(resolver.resolve_manifest())
    except MalformedManifestError as e:
        raise click.ClickException(str(e)) from e

    if as_json:
        click.echo(json.dumps({"root": str(manifest.root), "files": [str(p) for p in manifest]}))
        return

    table = Table(title=f"Project files ({len(manifest)})")
    table.add_column("Path")
    for path in manifest:
        table.add_row(str(_display_path(path, manifest.root)))
    Console().print(table)
