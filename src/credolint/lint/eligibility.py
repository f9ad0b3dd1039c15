"""File eligibility - which documents the linter considers part of the project."""

from __future__ import annotations

from pathlib import Path

import structlog

from credolint.core.errors import MalformedManifestError, ProcessFailure
from credolint.lint import process
from credolint.lint.models import LintSettings, ProjectManifest
from credolint.lint.parsers import parse_manifest
from credolint.lint.process import Runner

logger = structlog.get_logger()

INFO_ARGS: tuple[str, ...] = ("info", "--verbose", "--format=json")


class EligibilityResolver:
    """Answers whether a document is in scope, using the linter's info mode.

    The manifest is recomputed on every call unless ``settings.cache_manifest``
    is set, in which case it is kept until :meth:`invalidate`.
    """

    def __init__(self, settings: LintSettings, runner: Runner | None = None) -> None:
        self._settings = settings
        self._runner = runner
        self._cached: ProjectManifest | None = None

    @property
    def root(self) -> Path:
        return self._settings.working_root

    def build_info_args(self) -> list[str]:
        return [self._settings.subcommand, *INFO_ARGS]

    def invalidate(self) -> None:
        """Drop the cached manifest, if any."""
        self._cached = None

    async def resolve_manifest(self) -> ProjectManifest:
        """Run the linter in info mode and parse its project file list.

        A linter that cannot be started yields an empty manifest.

        Raises:
            MalformedManifestError: If the info output is not valid JSON.
        """
        if self._settings.cache_manifest and self._cached is not None:
            return self._cached

        # Looked up at call time so tests can patch process.run
        runner = self._runner or process.run
        try:
            result = await runner(
                self._settings.executable,
                self.build_info_args(),
                cwd=self.root,
                stdin=None,
                timeout=self._settings.timeout_sec,
            )
        except ProcessFailure as e:
            logger.warning(
                "manifest_unavailable",
                error=e.error_name,
                reason=e.message,
                command=e.command,
                root=str(self.root),
            )
            return ProjectManifest.empty(self.root)

        manifest = parse_manifest(result.stdout, self.root)
        logger.debug("manifest_resolved", root=str(self.root), files=len(manifest))
        if self._settings.cache_manifest:
            self._cached = manifest
        return manifest

    async def is_eligible(self, path: Path | str) -> bool:
        """Whether ``path`` is one of the project's linted files.

        A malformed manifest counts as "not eligible".
        """
        try:
            manifest = await self.resolve_manifest()
        except MalformedManifestError as e:
            logger.warning("manifest_malformed", reason=e.message, root=str(self.root))
            return False
        return Path(path) in manifest
