"""credolint error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Process
- 4xxx: Output
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Process (3xxx)
    PROCESS_SPAWN_FAILED = 3001
    PROCESS_TIMEOUT = 3002

    # Output (4xxx)
    MANIFEST_MALFORMED = 4001


@dataclass(frozen=True, slots=True)
class CredoLintError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'CONFIG_PARSE_ERROR')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(CredoLintError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class ProcessFailure(CredoLintError):
    """The linter executable could not be run to completion."""

    @property
    def command(self) -> list[str]:
        return list(self.details.get("command", []))

    @classmethod
    def spawn_failed(cls, command: list[str], reason: str) -> "ProcessFailure":
        return cls(
            code=ErrorCode.PROCESS_SPAWN_FAILED,
            message=f"Could not start '{command[0] if command else ''}': {reason}",
            details={"command": command, "reason": reason},
        )


class ProcessTimeoutError(ProcessFailure):
    """The linter ran past its deadline and was killed."""

    @classmethod
    def timed_out(cls, command: list[str], timeout: float) -> "ProcessTimeoutError":
        return cls(
            code=ErrorCode.PROCESS_TIMEOUT,
            message=f"'{command[0] if command else ''}' did not finish within {timeout:g}s",
            retryable=True,
            details={"command": command, "timeout_sec": timeout},
        )


class MalformedManifestError(CredoLintError):
    """Info-mode output could not be decoded as a JSON manifest."""

    @classmethod
    def invalid_json(cls, reason: str, excerpt: str = "") -> "MalformedManifestError":
        return cls(
            code=ErrorCode.MANIFEST_MALFORMED,
            message=f"Linter info output is not valid JSON: {reason}",
            details={"reason": reason, "excerpt": excerpt[:200]},
        )

