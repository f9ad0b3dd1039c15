"""Config module exports."""

from credolint.config.loader import CredoLintSettings, load_config
from credolint.config.models import (
    CredoLintConfig,
    LinterConfig,
    LoggingConfig,
    LogOutputConfig,
)

__all__ = [
    "load_config",
    "CredoLintConfig",
    "CredoLintSettings",
    "LinterConfig",
    "LoggingConfig",
    "LogOutputConfig",
]
