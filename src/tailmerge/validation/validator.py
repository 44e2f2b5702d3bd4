"""Stylesheet validator: runs all validation rules and reports diagnostics."""

from __future__ import annotations

from functools import partial
from typing import Callable

from tailmerge.model.diagnostic import Diagnostic
from tailmerge.validation.rules import (
    ALL_RULES,
    DEFAULT_BASE_PACKAGE,
    check_tailwind_import_first,
)


class ValidationError(Exception):
    """Raised when validation produces ERROR-severity diagnostics."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        messages = [str(d) for d in diagnostics if d.is_error]
        super().__init__(
            f"Validation failed with {len(messages)} error(s): " + "; ".join(messages)
        )


RuleFunc = Callable[[str], list[Diagnostic]]


def validate_tailwind_order(
    css: str, base_package: str = DEFAULT_BASE_PACKAGE
) -> list[Diagnostic]:
    """Check only that the base package import comes first. Empty means OK."""
    return check_tailwind_import_first(css, base_package)


def validate(
    css: str,
    extra_rules: list[RuleFunc] | None = None,
    base_package: str = DEFAULT_BASE_PACKAGE,
) -> list[Diagnostic]:
    """Run all validation rules against *css*.

    Returns the full list of diagnostics (errors and warnings).
    """
    rules: list[RuleFunc] = [
        partial(rule, base_package=base_package)
        if rule is check_tailwind_import_first
        else rule
        for rule in ALL_RULES
    ]
    if extra_rules:
        rules.extend(extra_rules)
    diagnostics: list[Diagnostic] = []
    for rule in rules:
        diagnostics.extend(rule(css))
    return diagnostics


def validate_or_raise(
    css: str,
    extra_rules: list[RuleFunc] | None = None,
    base_package: str = DEFAULT_BASE_PACKAGE,
) -> list[Diagnostic]:
    """Run validation; raises :class:`ValidationError` if any ERROR diagnostics exist.

    Returns the warnings when no errors are found.
    """
    diagnostics = validate(css, extra_rules=extra_rules, base_package=base_package)
    errors = [d for d in diagnostics if d.is_error]
    if errors:
        raise ValidationError(errors)
    return diagnostics
