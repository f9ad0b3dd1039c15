"""Output parsers for the linter's oneline and JSON info formats."""

from __future__ import annotations

import json
import re
from collections.abc import Iterator
from pathlib import Path

import structlog

from credolint.core.errors import MalformedManifestError
from credolint.lint.models import DiagnosticInfo, ParseStats, ProjectManifest, RawFinding
from credolint.lint.normalize import normalize

logger = structlog.get_logger()

# lib/foo.ex:5:3: C: Function is too complex. [Credo.Check.Refactor.CyclomaticComplexity]
# Line and column are captured loosely so that bad coordinates reach the
# normalizer instead of silently failing to match. Column may be absent.
_FINDING_RE = re.compile(
    r"^(?P<path>.+?)"
    r":(?P<position>[^:\s]*)"
    r"(?::(?P<column>[^:\s]*))?"
    r":\s+(?P<category>[A-Z]):\s+"
    r"(?P<message>.*?)"
    r"\s+\[(?P<check>[\w.]+)\]\s*$"
)


def split_records(raw: str) -> Iterator[str]:
    """Yield the non-blank lines of raw process output."""
    for line in raw.splitlines():
        if line.strip():
            yield line


def parse_finding_record(line: str) -> RawFinding | None:
    """Extract a finding from one oneline-format line, or None if it is not one."""
    match = _FINDING_RE.match(line.strip())
    if match is None:
        return None
    return RawFinding(
        path=match.group("path"),
        position=match.group("position"),
        column=match.group("column"),
        category=match.group("category"),
        message=match.group("message"),
        check=match.group("check"),
    )


def parse_manifest(raw: str, root: Path) -> ProjectManifest:
    """Parse info-mode JSON output into a manifest of absolute paths.

    Raises:
        MalformedManifestError: If the output is not valid JSON.
    """
    text = "\n".join(split_records(raw))
    try:
        info = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedManifestError.invalid_json(str(e), text) from e

    config = info.get("config") if isinstance(info, dict) else None
    if not isinstance(config, dict):
        return ProjectManifest.empty(root)
    files = config.get("files") or []
    if not isinstance(files, list):
        raise MalformedManifestError.invalid_json("config.files is not a list", text)
    return ProjectManifest.from_relative(root, (f for f in files if isinstance(f, str)))


def parse_output(raw: str) -> tuple[list[DiagnosticInfo], ParseStats]:
    """Parse a whole lint-mode output, dropping records that cannot be used.

    A bad record never affects the rest of the batch.
    """
    stats = ParseStats()
    infos: list[DiagnosticInfo] = []

    for line in split_records(raw):
        stats.records += 1
        finding = parse_finding_record(line)
        if finding is None:
            stats.unmatched += 1
            continue
        stats.findings += 1

        info = normalize(finding)
        if info is None:
            stats.malformed += 1
            logger.debug(
                "malformed_record_dropped",
                check=finding.check,
                position=finding.position,
                column=finding.column,
            )
            continue
        infos.append(info)

    if stats.malformed:
        logger.warning(
            "malformed_records_dropped",
            dropped=stats.malformed,
            findings=stats.findings,
        )
    return infos, stats
