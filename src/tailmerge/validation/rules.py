"""Validation rules for stylesheets.

Each rule is a function taking the stylesheet text and returning a list of
Diagnostic objects describing any issues found.
"""

from __future__ import annotations

import re

from tailmerge.merge.imports import normalize_import_path
from tailmerge.model.diagnostic import Diagnostic, Severity
from tailmerge.model.directive import DirectiveKind
from tailmerge.parser.directives import parse_directives

DEFAULT_BASE_PACKAGE = "tailwindcss"

_IMPORT_PATH_RE = re.compile(
    r"""@import\s+(?:url\(\s*["']?(?P<url>[^"')]+)["']?\s*\)|["'](?P<quoted>[^"']+)["'])""",
    re.IGNORECASE,
)


def _line_of(source: str, offset: int) -> int:
    return source.count("\n", 0, offset) + 1


# ---------------------------------------------------------------------------
# Ordering rules (ERROR severity)
# ---------------------------------------------------------------------------


def check_tailwind_import_first(
    css: str, base_package: str = DEFAULT_BASE_PACKAGE
) -> list[Diagnostic]:
    """The base package import must precede every other import.

    Works line by line rather than from parsed directives, so an import split
    across lines is judged by the line holding ``@import``.
    """
    lines = css.split("\n")
    base_index = next(
        (i for i, line in enumerate(lines) if "@import" in line and base_package in line),
        None,
    )
    other_indices = [
        i for i, line in enumerate(lines) if "@import" in line and base_package not in line
    ]
    if base_index is None or not other_indices:
        return []

    earlier = [i for i in other_indices if i < base_index]
    if not earlier:
        return []
    return [
        Diagnostic(
            rule="check_tailwind_import_first",
            severity=Severity.ERROR,
            message=f"@import '{base_package}' should come before other imports",
            line=earlier[0] + 1,
            fix=f"Move the '{base_package}' import to the top of the import list.",
        )
    ]


# ---------------------------------------------------------------------------
# Hygiene rules (WARNING severity)
# ---------------------------------------------------------------------------


def check_duplicate_imports(css: str) -> list[Diagnostic]:
    """The same path should be imported only once."""
    seen: set[str] = set()
    diagnostics: list[Diagnostic] = []
    for directive in parse_directives(css):
        if directive.kind is not DirectiveKind.IMPORT:
            continue
        match = _IMPORT_PATH_RE.match(directive.text(css))
        if match is None:
            continue
        path = normalize_import_path(match.group("url") or match.group("quoted"))
        if path in seen:
            diagnostics.append(
                Diagnostic(
                    rule="check_duplicate_imports",
                    severity=Severity.WARNING,
                    message=f"'{path}' is imported more than once.",
                    line=_line_of(css, directive.start),
                    fix="Remove the repeated @import.",
                )
            )
        seen.add(path)
    return diagnostics


def check_single_theme_block(css: str) -> list[Diagnostic]:
    """Only the first @theme block is updated when a theme is merged in."""
    themes = [d for d in parse_directives(css) if d.kind is DirectiveKind.THEME]
    return [
        Diagnostic(
            rule="check_single_theme_block",
            severity=Severity.WARNING,
            message="Additional @theme block will not be updated by theme merges.",
            line=_line_of(css, directive.start),
            fix="Fold all theme variables into the first @theme block.",
        )
        for directive in themes[1:]
    ]


# ---------------------------------------------------------------------------
# Rule registry
# ---------------------------------------------------------------------------

ALL_RULES = [
    check_tailwind_import_first,
    check_duplicate_imports,
    check_single_theme_block,
]
