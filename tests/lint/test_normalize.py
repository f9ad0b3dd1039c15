"""Tests for coordinate normalization."""

from __future__ import annotations

import pytest

from credolint.lint.models import RawFinding
from credolint.lint.normalize import normalize, zero_index


def _finding(position: str, column: str | None) -> RawFinding:
    return RawFinding(
        path="lib/foo.ex",
        position=position,
        column=column,
        category="W",
        message="msg",
        check="Credo.Check.Warning.IoInspect",
    )


class TestZeroIndex:
    @pytest.mark.parametrize("value", [0, -1, -100])
    def test_non_positive_clamps_to_zero(self, value: int) -> None:
        assert zero_index(value) == 0

    @pytest.mark.parametrize("value", [1, 2, 57, 10_000])
    def test_positive_subtracts_one(self, value: int) -> None:
        assert zero_index(value) == value - 1


class TestNormalize:
    def test_valid_finding(self) -> None:
        info = normalize(_finding("5", "3"))
        assert info is not None
        assert (info.start_line, info.start_column, info.end_line, info.end_column) == (4, 0, 4, 2)
        assert info.check == "Credo.Check.Warning.IoInspect"
        assert info.message == "msg"

    def test_first_line_first_column(self) -> None:
        info = normalize(_finding("1", "1"))
        assert info is not None
        assert (info.start_line, info.end_line, info.end_column) == (0, 0, 0)

    @pytest.mark.parametrize(
        ("position", "column"),
        [
            ("abc", "3"),
            ("5", "x"),
            ("", "3"),
            ("5", ""),
            ("5", None),
            ("5abc", "3"),
            ("5.5", "3"),
        ],
    )
    def test_non_numeric_dropped(self, position: str, column: str | None) -> None:
        assert normalize(_finding(position, column)) is None

    @pytest.mark.parametrize(("position", "column"), [("0", "3"), ("5", "0"), ("-2", "3"), ("5", "-1")])
    def test_non_positive_dropped(self, position: str, column: str) -> None:
        assert normalize(_finding(position, column)) is None

    @pytest.mark.parametrize(("position", "column"), [("1", "1"), ("7", "12"), ("300", "2")])
    def test_single_line_span_from_column_zero(self, position: str, column: str) -> None:
        info = normalize(_finding(position, column))
        assert info is not None
        assert info.start_column == 0
        assert info.start_line == info.end_line
