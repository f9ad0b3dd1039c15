"""Coordinate normalization - 1-based linter positions to 0-based ranges."""

from __future__ import annotations

import re

from credolint.lint.models import DiagnosticInfo, RawFinding

_INT_RE = re.compile(r"^\s*[+-]?\d+\s*$")


def zero_index(value: int) -> int:
    """Convert a 1-based coordinate to 0-based, clamping at 0."""
    if value <= 0:
        return 0
    return value - 1


def _parse_coordinate(token: str | None) -> int | None:
    if token is None or not _INT_RE.match(token):
        return None
    return int(token)


def normalize(raw: RawFinding) -> DiagnosticInfo | None:
    """Validate a finding's coordinates and convert them to a single-line span.

    Returns None when the line or column is missing, not an integer, or not
    positive. The span always starts at column 0; the reported column only
    determines where it ends.
    """
    position = _parse_coordinate(raw.position)
    column = _parse_coordinate(raw.column)
    if position is None or column is None:
        return None
    if position <= 0 or column <= 0:
        return None

    line = zero_index(position)
    return DiagnosticInfo(
        check=raw.check,
        message=raw.message,
        start_line=line,
        start_column=0,
        end_line=line,
        end_column=zero_index(column),
    )
