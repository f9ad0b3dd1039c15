"""Lint operations - run the linter on a document and publish its diagnostics."""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass
from pathlib import Path

import structlog

from credolint.core.errors import ProcessFailure
from credolint.core.logging import set_lint_id
from credolint.lint import process
from credolint.lint.collection import DiagnosticCollection
from credolint.lint.eligibility import EligibilityResolver
from credolint.lint.models import (
    Diagnostic,
    DiagnosticInfo,
    LintOutcome,
    LintSettings,
    Range,
)
from credolint.lint.parsers import parse_output
from credolint.lint.process import Runner
from credolint.lint.severity import classify

logger = structlog.get_logger()

LINT_ARGS: tuple[str, ...] = ("list", "--format=oneline", "--read-from-stdin")
STRICT_FLAG = "--strict"


@dataclass(frozen=True)
class Document:
    """An open document as seen by the host."""

    uri: str
    path: Path
    language_id: str
    text: str
    version: int = 0

    @classmethod
    def from_file(cls, path: Path, language_id: str = "elixir") -> Document:
        resolved = path.resolve()
        return cls(
            uri=resolved.as_uri(),
            path=resolved,
            language_id=language_id,
            text=resolved.read_text(encoding="utf-8", errors="replace"),
        )


class LintOps:
    """Lint documents and keep their diagnostics in a collection.

    Each lint of a document gets a generation number. Only the newest
    generation of a document may publish; older runs that finish late are
    reported as superseded and leave the collection alone.
    """

    def __init__(
        self,
        settings: LintSettings,
        collection: DiagnosticCollection,
        *,
        resolver: EligibilityResolver | None = None,
        runner: Runner | None = None,
    ) -> None:
        self._settings = settings
        self._collection = collection
        self._runner = runner
        self._resolver = resolver or EligibilityResolver(settings, runner=runner)
        self._generations: dict[str, int] = {}
        self._tasks: dict[str, asyncio.Task[LintOutcome]] = {}

    @property
    def settings(self) -> LintSettings:
        return self._settings

    @property
    def collection(self) -> DiagnosticCollection:
        return self._collection

    @property
    def resolver(self) -> EligibilityResolver:
        return self._resolver

    def build_lint_args(self) -> list[str]:
        """Arguments for lint mode, document text is read from stdin."""
        args = [self._settings.subcommand, *LINT_ARGS]
        if self._settings.strict:
            args.append(STRICT_FLAG)
        return args

    def to_diagnostic(self, info: DiagnosticInfo) -> Diagnostic:
        severity = classify(
            info.check,
            strict=self._settings.strict,
            overrides=self._settings.severity_overrides,
        )
        return Diagnostic(
            range=Range.from_coords(
                info.start_line, info.start_column, info.end_line, info.end_column
            ),
            message=f"{info.message} [{info.check}:{severity.value}]",
            severity=severity,
            code=info.check,
        )

    def generation(self, uri: str) -> int:
        """Latest generation handed out for ``uri`` (0 if never linted)."""
        return self._generations.get(uri, 0)

    def _next_generation(self, uri: str) -> int:
        gen = self._generations.get(uri, 0) + 1
        self._generations[uri] = gen
        return gen

    def _is_current(self, uri: str, generation: int) -> bool:
        return self._generations.get(uri) == generation

    async def lint_document(
        self, document: Document, *, generation: int | None = None
    ) -> LintOutcome:
        """Lint one document and replace its diagnostics.

        Steps: language filter, eligibility, linter run with the text on
        stdin, parse, publish. Failures leave existing diagnostics in place.
        """
        start_time = time.monotonic()
        uri = document.uri

        if document.language_id != self._settings.language_id:
            return LintOutcome(uri=uri, status="skipped")

        gen = generation if generation is not None else self._next_generation(uri)
        set_lint_id()
        log = logger.bind(uri=uri, generation=gen)

        def outcome(status: str, **kwargs: object) -> LintOutcome:
            return LintOutcome(
                uri=uri,
                status=status,  # type: ignore[arg-type]
                generation=gen,
                duration_seconds=time.monotonic() - start_time,
                **kwargs,  # type: ignore[arg-type]
            )

        if not await self._resolver.is_eligible(document.path):
            log.debug("lint_skipped_ineligible", path=str(document.path))
            return outcome("ineligible")

        if not self._is_current(uri, gen):
            log.debug("lint_superseded", stage="eligibility")
            return outcome("superseded")

        # Looked up at call time so tests can patch process.run
        runner = self._runner or process.run
        try:
            result = await runner(
                self._settings.executable,
                self.build_lint_args(),
                cwd=self._settings.working_root,
                stdin=document.text,
                timeout=self._settings.timeout_sec,
            )
        except ProcessFailure as e:
            log.warning(
                "linter_unavailable", error=e.error_name, reason=e.message, command=e.command
            )
            return outcome("error", error_detail=e.message)

        infos, stats = parse_output(result.stdout)
        diagnostics = [self.to_diagnostic(info) for info in infos]

        if not self._is_current(uri, gen):
            log.debug("lint_superseded", stage="publish", diagnostics=len(diagnostics))
            return outcome("superseded", diagnostics=diagnostics, stats=stats)

        self._collection.set(uri, diagnostics)
        log.info(
            "lint_published",
            diagnostics=len(diagnostics),
            dropped=stats.dropped,
            returncode=result.returncode,
        )
        return outcome("published", diagnostics=diagnostics, stats=stats)

    def schedule(self, document: Document) -> asyncio.Task[LintOutcome]:
        """Start linting in the background, superseding any run for the same document."""
        uri = document.uri
        if document.language_id != self._settings.language_id:
            # Other languages never supersede a lint of the same uri
            return asyncio.get_running_loop().create_task(self.lint_document(document))

        previous = self._tasks.get(uri)
        if previous is not None and not previous.done():
            previous.cancel()
            logger.debug("lint_cancelled", uri=uri, generation=self.generation(uri))

        gen = self._next_generation(uri)
        task = asyncio.get_running_loop().create_task(
            self.lint_document(document, generation=gen),
            name=f"credolint:{uri}:{gen}",
        )
        self._tasks[uri] = task
        task.add_done_callback(lambda t: self._on_task_done(uri, t))
        return task

    def _on_task_done(self, uri: str, task: asyncio.Task[LintOutcome]) -> None:
        if self._tasks.get(uri) is task:
            del self._tasks[uri]
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("lint_task_failed", uri=uri, error=str(exc), exc_info=exc)

    def in_flight(self) -> list[str]:
        return [uri for uri, task in self._tasks.items() if not task.done()]

    async def drain(self) -> None:
        """Wait for every scheduled lint to finish."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks.values()), return_exceptions=True)

    async def cancel_all(self) -> None:
        tasks = list(self._tasks.values())
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
