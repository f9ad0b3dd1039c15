"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (CREDOLINT__SECTION__KEY)
3. Repo YAML (.credolint.yaml in the project root)
4. Global YAML (~/.config/credolint/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    CREDOLINT__<SECTION>__<KEY>=<VALUE>

Examples:
    CREDOLINT__LOGGING__LEVEL=DEBUG
    CREDOLINT__LINTER__STRICT=true
    CREDOLINT__LINTER__TIMEOUT_SEC=30
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel, Field, field_validator

if TYPE_CHECKING:
    from credolint.lint.models import LintSettings

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
SeverityName = Literal["error", "warning", "info", "hint"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        CREDOLINT__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG logs every dropped output record.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class LinterConfig(BaseModel):
    """How the linter is invoked and how its findings are graded.

    Env vars:
        CREDOLINT__LINTER__EXECUTABLE: Build tool used to launch the linter
        CREDOLINT__LINTER__STRICT: Pass --strict to the linter
        CREDOLINT__LINTER__TIMEOUT_SEC: Kill a linter run after this many seconds
        CREDOLINT__LINTER__CACHE_MANIFEST: Reuse the project file list between runs
    """

    executable: str = Field(
        default="mix",
        description="Executable that hosts the linter task.",
    )
    subcommand: str = Field(
        default="credo",
        description="Task name passed as the first argument.",
    )
    strict: bool = Field(
        default=False,
        description="Run in strict mode. Also promotes default severities by one level.",
    )
    language_id: str = Field(
        default="elixir",
        description="Only documents with this language identifier are linted.",
    )
    timeout_sec: float | None = Field(
        default=60.0,
        description="Kill a linter run after this many seconds. None waits forever.",
    )
    cache_manifest: bool = Field(
        default=False,
        description="Keep the project file list between lint runs until invalidated. "
        "RISK: files added to the project are not linted until the cache is dropped.",
    )
    severity_overrides: dict[str, SeverityName] = Field(
        default_factory=dict,
        description="Severity per check category (e.g. 'Readability') or full check id.",
    )

    @field_validator("timeout_sec")
    @classmethod
    def validate_timeout(cls, v: float | None) -> float | None:
        if v is not None and v <= 0:
            raise ValueError(f"timeout_sec must be positive, got {v}")
        return v

    @field_validator("executable", "subcommand", "language_id")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    def to_settings(self, working_root: Path) -> LintSettings:
        """Freeze this config into the explicit values a lint run consumes."""
        from credolint.lint.models import LintSettings, Severity

        return LintSettings(
            working_root=working_root,
            executable=self.executable,
            subcommand=self.subcommand,
            strict=self.strict,
            language_id=self.language_id,
            timeout_sec=self.timeout_sec,
            cache_manifest=self.cache_manifest,
            severity_overrides={k: Severity(v) for k, v in self.severity_overrides.items()},
        )


class CredoLintConfig(BaseModel):
    """Root configuration for credolint.

    All settings can be configured via:
    1. Environment variables: CREDOLINT__SECTION__KEY
    2. YAML config files (repo or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    linter: LinterConfig = Field(default_factory=LinterConfig)
