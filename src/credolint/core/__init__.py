"""Core module exports."""

from credolint.core.errors import (
    ConfigError,
    CredoLintError,
    ErrorCode,
    MalformedManifestError,
    ProcessFailure,
    ProcessTimeoutError,
)
from credolint.core.logging import (
    clear_lint_id,
    configure_logging,
    get_lint_id,
    set_lint_id,
)

__all__ = [
    # Errors
    "ConfigError",
    "CredoLintError",
    "ErrorCode",
    "MalformedManifestError",
    "ProcessFailure",
    "ProcessTimeoutError",
    # Logging
    "clear_lint_id",
    "configure_logging",
    "get_lint_id",
    "set_lint_id",
]
