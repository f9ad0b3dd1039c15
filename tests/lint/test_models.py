"""Tests for lint/models.py module."""

from __future__ import annotations

from pathlib import Path

import pytest

from credolint.lint.models import (
    Diagnostic,
    LintOutcome,
    LintSettings,
    ParseStats,
    Position,
    ProjectManifest,
    Range,
    Severity,
)


class TestSeverity:
    def test_severity_values(self) -> None:
        assert Severity.ERROR.value == "error"
        assert Severity.WARNING.value == "warning"
        assert Severity.INFO.value == "info"
        assert Severity.HINT.value == "hint"


class TestRange:
    def test_from_coords(self) -> None:
        rng = Range.from_coords(4, 0, 4, 2)
        assert rng.start == Position(4, 0)
        assert rng.end == Position(4, 2)


class TestDiagnostic:
    def test_to_dict(self) -> None:
        diag = Diagnostic(
            range=Range.from_coords(1, 0, 1, 5),
            message="m [Credo.Check.Warning.X:warning]",
            severity=Severity.WARNING,
            code="Credo.Check.Warning.X",
        )
        assert diag.to_dict() == {
            "range": {"start": {"line": 1, "character": 0}, "end": {"line": 1, "character": 5}},
            "message": "m [Credo.Check.Warning.X:warning]",
            "severity": "warning",
            "code": "Credo.Check.Warning.X",
            "source": "credo",
        }

    def test_equality(self) -> None:
        a = Diagnostic(range=Range.from_coords(0, 0, 0, 1), message="m", severity=Severity.HINT)
        b = Diagnostic(range=Range.from_coords(0, 0, 0, 1), message="m", severity=Severity.HINT)
        assert a == b


class TestProjectManifest:
    def test_from_relative_scenario(self) -> None:
        manifest = ProjectManifest.from_relative(Path("/proj"), ["lib/foo.ex", "lib/bar.ex"])
        assert list(manifest) == [Path("/proj/lib/foo.ex"), Path("/proj/lib/bar.ex")]
        assert Path("/proj/lib/foo.ex") in manifest
        assert Path("/proj/lib/other.ex") not in manifest

    def test_string_and_relative_membership(self) -> None:
        manifest = ProjectManifest.from_relative(Path("/proj"), ["lib/foo.ex"])
        assert "/proj/lib/foo.ex" in manifest
        assert "lib/foo.ex" in manifest
        assert 42 not in manifest

    def test_empty(self) -> None:
        manifest = ProjectManifest.empty(Path("/proj"))
        assert len(manifest) == 0
        assert Path("/proj/lib/foo.ex") not in manifest


class TestParseStats:
    def test_dropped_counts_malformed(self) -> None:
        stats = ParseStats(records=5, findings=4, unmatched=1, malformed=2)
        assert stats.dropped == 2


class TestLintOutcome:
    def test_published_flag(self) -> None:
        assert LintOutcome(uri="file:///a.ex", status="published").published
        assert not LintOutcome(uri="file:///a.ex", status="error").published


class TestLintSettings:
    def test_override_names_become_severities(self) -> None:
        settings = LintSettings(working_root=Path("/proj"), severity_overrides={"Design": "hint"})
        assert settings.severity_overrides == {"Design": Severity.HINT}

    def test_unknown_override_name_rejected(self) -> None:
        with pytest.raises(ValueError):
            LintSettings(working_root=Path("/proj"), severity_overrides={"Design": "critical"})


class TestManifestCanonicalPaths:
    def test_entries_are_normalized(self) -> None:
        manifest = ProjectManifest.from_relative(
            Path("/proj"), ["lib/../lib/foo.ex", "./lib/bar.ex"]
        )
        assert list(manifest) == [Path("/proj/lib/foo.ex"), Path("/proj/lib/bar.ex")]

    def test_candidate_is_normalized(self) -> None:
        manifest = ProjectManifest.from_relative(Path("/proj"), ["lib/foo.ex"])
        assert Path("/proj/lib/sub/../foo.ex") in manifest
        assert "lib/./foo.ex" in manifest
