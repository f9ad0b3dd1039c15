"""Lint module - run Credo on documents and publish diagnostics."""

from credolint.lint.collection import DiagnosticCollection
from credolint.lint.eligibility import EligibilityResolver
from credolint.lint.models import (
    Diagnostic,
    DiagnosticInfo,
    LintOutcome,
    LintSettings,
    ParseStats,
    Position,
    ProjectManifest,
    Range,
    RawFinding,
    Severity,
)
from credolint.lint.ops import Document, LintOps
from credolint.lint.provider import LintingProvider

__all__ = [
    "Diagnostic",
    "DiagnosticCollection",
    "DiagnosticInfo",
    "Document",
    "EligibilityResolver",
    "LintOps",
    "LintOutcome",
    "LintSettings",
    "LintingProvider",
    "ParseStats",
    "Position",
    "ProjectManifest",
    "Range",
    "RawFinding",
    "Severity",
]
