"""Severity classification for Credo check identifiers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Final

from credolint.lint.models import Severity

_CHECK_PREFIX = "Credo.Check."

DEFAULT_SEVERITY: Final = Severity.INFO

# Keyed by the category segment of "Credo.Check.<Category>.<Name>"
CATEGORY_SEVERITIES: Final[dict[str, Severity]] = {
    "Warning": Severity.WARNING,
    "Refactor": Severity.INFO,
    "Design": Severity.INFO,
    "Readability": Severity.HINT,
    "Consistency": Severity.HINT,
}

_PROMOTIONS: Final[dict[Severity, Severity]] = {
    Severity.HINT: Severity.INFO,
    Severity.INFO: Severity.WARNING,
    Severity.WARNING: Severity.ERROR,
    Severity.ERROR: Severity.ERROR,
}


def check_category(check_id: str) -> str | None:
    """Extract the category from a check id, e.g. 'Refactor'."""
    if not check_id.startswith(_CHECK_PREFIX):
        return None
    category, _, name = check_id[len(_CHECK_PREFIX) :].partition(".")
    if not category or not name:
        return None
    return category


def promote(severity: Severity) -> Severity:
    return _PROMOTIONS[severity]


def classify(
    check_id: str,
    strict: bool = False,
    overrides: Mapping[str, Severity | str] | None = None,
) -> Severity:
    """Map a check id to a severity.

    Args:
        check_id: Full check identifier, e.g. "Credo.Check.Warning.IoInspect".
        strict: Promote the table default by one level.
        overrides: Severity per full check id or per category. A full id wins
            over its category; overridden severities are never promoted.

    Returns:
        Severity for the check. Ids outside the table map to DEFAULT_SEVERITY.
    """
    category = check_category(check_id)

    if overrides:
        for key in (check_id, category):
            if key is not None and key in overrides:
                return Severity(overrides[key])

    severity = CATEGORY_SEVERITIES.get(category or "", DEFAULT_SEVERITY)
    return promote(severity) if strict else severity
