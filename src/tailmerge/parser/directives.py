"""Scanner for the Tailwind-style at-rules in a stylesheet.

Each directive kind is located by its own independent scan; the hits are then
merged into a single list ordered by offset:

    @import "tailwindcss" source(none);
    @source "../js";
    @plugin "../vendor/heroicons";
    @custom-variant dark (&:where(.dark, .dark *));
    @theme { --color-primary: blue; }

Directives missing their terminator (``;`` or ``}``) are not reported.
"""

from __future__ import annotations

import re

from tailmerge.model.directive import Directive, DirectiveKind

__all__ = ["parse_directives", "IMPORT_RE"]

# @import "x" / @import 'x' / @import url(x), optionally followed by
# modifiers such as media queries or source(none).
IMPORT_RE = re.compile(
    r"""
    @import\s+
    (?:url\([^)]+\)|["'][^"']+["'])   # quoted path or url(...)
    (?:\s+[^;]*)?                      # trailing modifiers
    ;
    """,
    re.VERBOSE | re.IGNORECASE,
)

# Statement directives: keyword, whitespace, then anything up to ';'.
_STATEMENT_RES: dict[DirectiveKind, re.Pattern[str]] = {
    DirectiveKind.SOURCE: re.compile(r"@source\s+[^;]+;", re.IGNORECASE),
    DirectiveKind.PLUGIN: re.compile(r"@plugin\s+[^;]+;", re.IGNORECASE),
    DirectiveKind.TAILWIND: re.compile(r"@tailwind\s+[^;]+;", re.IGNORECASE),
    DirectiveKind.CUSTOM_VARIANT: re.compile(
        r"@custom-variant\s+[^;]+;", re.IGNORECASE
    ),
}

# Single-level block: the first '}' closes it.
THEME_RE = re.compile(r"@theme\s*\{[^}]*\}", re.IGNORECASE)


_SCANNERS: list[tuple[DirectiveKind, re.Pattern[str]]] = [
    (DirectiveKind.IMPORT, IMPORT_RE),
    *_STATEMENT_RES.items(),
    (DirectiveKind.THEME, THEME_RE),
]


def parse_directives(source: str) -> list[Directive]:
    """Locate every recognized directive in *source*.

    Returns directives sorted by start offset. Spans never overlap: a hit that
    starts inside an earlier directive is dropped.
    """
    found: list[Directive] = []
    for kind, pattern in _SCANNERS:
        for match in pattern.finditer(source):
            found.append(Directive(kind=kind, start=match.start(), end=match.end()))
    found.sort(key=lambda d: d.start)

    directives: list[Directive] = []
    for directive in found:
        if directives and directive.start < directives[-1].end:
            continue
        directives.append(directive)
    return directives
