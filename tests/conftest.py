"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages, and
provides a stand-in linter script that speaks the same text contract as
``mix credo``.
"""

import sys
import textwrap
from pathlib import Path

import pytest

# Insert local src directory at the beginning of sys.path
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of credolint modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("credolint"):
        del sys.modules[module_name]

from credolint.lint.models import LintSettings  # noqa: E402

FAKE_CREDO = textwrap.dedent(
    '''
    """Prints what `mix credo` would for the modes credolint uses."""
    import json
    import sys

    mode = sys.argv[1]
    if mode == "info":
        print(json.dumps({"system": {"credo": "1.7.0"}, "config": {"files": ["lib/foo.ex", "lib/bar.ex"]}}))
        sys.exit(0)

    if mode == "list":
        text = sys.stdin.read()
        findings = 0
        for number, line in enumerate(text.splitlines(), 1):
            if "IO.inspect" in line:
                findings += 1
                column = line.index("IO.inspect") + 1
                print(
                    f"lib/foo.ex:{number}:{column}: W: There should be no calls to IO.inspect/1. "
                    "[Credo.Check.Warning.IoInspect]"
                )
            if "TODO" in line:
                findings += 1
                print(f"lib/foo.ex:{number}:1: D: Found a TODO tag in a comment. [Credo.Check.Design.TagTODO]")
        if "--strict" in sys.argv:
            print("lib/foo.ex:1:1: F: Modules should have a @moduledoc tag. [Credo.Check.Readability.ModuleDoc]")
            findings += 1
        print("")
        print("Analysis took 0.01 seconds")
        sys.exit(2 if findings else 0)

    sys.exit(64)
    '''
)


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """A minimal Mix project layout."""
    root = tmp_path / "proj"
    (root / "lib").mkdir(parents=True)
    (root / "mix.exs").write_text("defmodule Proj.MixProject do\nend\n")
    (root / "lib" / "foo.ex").write_text("defmodule Foo do\n  def run, do: IO.inspect(1)\nend\n")
    (root / "lib" / "bar.ex").write_text("defmodule Bar do\nend\n")
    (root / "lib" / "other.ex").write_text("defmodule Other do\nend\n")
    return root


@pytest.fixture
def fake_credo(tmp_path: Path) -> Path:
    script = tmp_path / "fake_credo.py"
    script.write_text(FAKE_CREDO)
    return script


@pytest.fixture
def fake_settings(project_root: Path, fake_credo: Path) -> LintSettings:
    """Settings that launch the stand-in linter through the current interpreter."""
    return LintSettings(
        working_root=project_root,
        executable=sys.executable,
        subcommand=str(fake_credo),
        timeout_sec=30.0,
    )
