"""Tests for CLI utilities.

Covers:
- find_project_root() function
"""

from __future__ import annotations

from pathlib import Path

import click
import pytest

from credolint.cli.utils import find_project_root


class TestFindProjectRoot:
    """Tests for find_project_root function."""

    def test_finds_root_from_root(self, project_root: Path) -> None:
        assert find_project_root(project_root) == project_root.resolve()

    def test_finds_root_from_subdirectory(self, project_root: Path) -> None:
        nested = project_root / "lib" / "a" / "b"
        nested.mkdir(parents=True)

        assert find_project_root(nested) == project_root.resolve()

    def test_finds_root_from_file(self, project_root: Path) -> None:
        """A file path starts the search at its directory."""
        assert find_project_root(project_root / "lib" / "foo.ex") == project_root.resolve()

    def test_nearest_project_wins(self, project_root: Path) -> None:
        """An umbrella child app is its own root."""
        child = project_root / "apps" / "child"
        child.mkdir(parents=True)
        (child / "mix.exs").write_text("")

        assert find_project_root(child / "lib") == child.resolve()

    def test_raises_when_not_in_project(self, tmp_path: Path) -> None:
        """Raises ClickException outside a Mix project."""
        with pytest.raises(click.ClickException) as exc_info:
            find_project_root(tmp_path)

        assert "Not inside a Mix project" in str(exc_info.value)
        assert str(tmp_path) in str(exc_info.value)
