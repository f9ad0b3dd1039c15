"""Editor lifecycle glue - turns document events into lint runs."""

from __future__ import annotations

import asyncio
from collections.abc import Iterable

import structlog

from credolint.lint.collection import DiagnosticCollection
from credolint.lint.models import LintSettings
from credolint.lint.ops import Document, LintOps
from credolint.lint.process import Runner

logger = structlog.get_logger()


class LintingProvider:
    """Hooks for a host that reports document open/change/save/close events.

    Every lint-triggering event schedules a background run; a newer event for
    the same document supersedes the older run.
    """

    def __init__(
        self,
        settings: LintSettings,
        collection: DiagnosticCollection | None = None,
        *,
        runner: Runner | None = None,
    ) -> None:
        self._collection = collection if collection is not None else DiagnosticCollection()
        self._ops = LintOps(settings, self._collection, runner=runner)
        self._active = False

    @property
    def ops(self) -> LintOps:
        return self._ops

    @property
    def collection(self) -> DiagnosticCollection:
        return self._collection

    @property
    def active(self) -> bool:
        return self._active

    def activate(self, documents: Iterable[Document] = ()) -> list[asyncio.Task]:
        """Start handling events and lint every document already open."""
        self._active = True
        tasks = [self._ops.schedule(doc) for doc in documents]
        logger.info("provider_activated", open_documents=len(tasks))
        return tasks

    def _trigger(self, document: Document) -> asyncio.Task | None:
        if not self._active:
            return None
        return self._ops.schedule(document)

    def on_open(self, document: Document) -> asyncio.Task | None:
        return self._trigger(document)

    def on_change(self, document: Document) -> asyncio.Task | None:
        return self._trigger(document)

    def on_save(self, document: Document) -> asyncio.Task | None:
        return self._trigger(document)

    def on_close(self, document: Document) -> None:
        self._collection.delete(document.uri)

    def invalidate_manifest(self) -> None:
        """Call when the project's file list may have changed."""
        self._ops.resolver.invalidate()

    async def dispose(self) -> None:
        """Stop handling events, cancel running lints, and clear all diagnostics."""
        self._active = False
        await self._ops.cancel_all()
        self._collection.dispose()
        logger.info("provider_disposed")
