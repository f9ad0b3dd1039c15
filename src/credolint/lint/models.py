"""Lint models - findings, diagnostics, manifests and outcomes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from functools import cached_property
from pathlib import Path
from typing import Literal


class Severity(Enum):
    """Diagnostic severity level."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    HINT = "hint"


@dataclass(frozen=True)
class LintSettings:
    """Explicit inputs of one lint run, resolved from config by the caller."""

    working_root: Path
    executable: str = "mix"
    subcommand: str = "credo"
    strict: bool = False
    language_id: str = "elixir"
    timeout_sec: float | None = 60.0
    cache_manifest: bool = False
    severity_overrides: Mapping[str, Severity] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Raises ValueError on an unknown severity name
        overrides = {key: Severity(value) for key, value in self.severity_overrides.items()}
        object.__setattr__(self, "severity_overrides", overrides)


@dataclass(frozen=True)
class RawFinding:
    """One finding line as printed by the linter.

    ``position`` and ``column`` hold the raw tokens; they are validated by
    :func:`credolint.lint.normalize.normalize`, not here.
    """

    path: str
    position: str
    column: str | None
    category: str
    message: str
    check: str


@dataclass(frozen=True)
class DiagnosticInfo:
    """A validated finding with 0-based, single-line coordinates."""

    check: str
    message: str
    start_line: int
    start_column: int
    end_line: int
    end_column: int


@dataclass(frozen=True, order=True)
class Position:
    line: int
    character: int


@dataclass(frozen=True)
class Range:
    """Half-open 0-based range."""

    start: Position
    end: Position

    @classmethod
    def from_coords(
        cls, start_line: int, start_column: int, end_line: int, end_column: int
    ) -> Range:
        return cls(Position(start_line, start_column), Position(end_line, end_column))


@dataclass(frozen=True)
class Diagnostic:
    """A renderable diagnostic handed to the diagnostic collection."""

    range: Range
    message: str
    severity: Severity
    code: str | None = None  # "Credo.Check.Readability.ModuleDoc"
    source: str = "credo"

    def to_dict(self) -> dict[str, object]:
        return {
            "range": {
                "start": {"line": self.range.start.line, "character": self.range.start.character},
                "end": {"line": self.range.end.line, "character": self.range.end.character},
            },
            "message": self.message,
            "severity": self.severity.value,
            "code": self.code,
            "source": self.source,
        }


@dataclass(frozen=True)
class ProjectManifest:
    """Canonical absolute paths of the files the linter considers part of the project."""

    root: Path
    files: tuple[Path, ...] = ()

    @classmethod
    def from_relative(cls, root: Path, relative: Iterable[str]) -> ProjectManifest:
        root = root.resolve()
        return cls(root=root, files=tuple((root / rel).resolve() for rel in relative))

    @classmethod
    def empty(cls, root: Path) -> ProjectManifest:
        return cls(root=root)

    @cached_property
    def _members(self) -> frozenset[Path]:
        return frozenset(self.files)

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, (str, Path)):
            return False
        candidate = Path(path)
        if not candidate.is_absolute():
            candidate = self.root / candidate
        return candidate.resolve() in self._members

    def __iter__(self) -> Iterator[Path]:
        return iter(self.files)

    def __len__(self) -> int:
        return len(self.files)


@dataclass
class ParseStats:
    """Counters for one pass over linter output."""

    records: int = 0
    findings: int = 0
    unmatched: int = 0  # lines that are not findings (summaries, banners)
    malformed: int = 0  # findings dropped for unusable coordinates

    @property
    def dropped(self) -> int:
        return self.malformed


@dataclass
class LintOutcome:
    """Result of handling one lint trigger for one document."""

    uri: str
    status: Literal["published", "skipped", "ineligible", "error", "superseded"]
    generation: int = 0
    diagnostics: list[Diagnostic] = field(default_factory=list)
    stats: ParseStats | None = None
    duration_seconds: float = 0.0
    error_detail: str | None = None

    @property
    def published(self) -> bool:
        return self.status == "published"
