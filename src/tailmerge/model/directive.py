"""Directive model: the recognized CSS at-rules and their ordering priority."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class DirectiveKind(Enum):
    """At-rule keywords understood by the directive parser."""

    IMPORT = "@import"
    SOURCE = "@source"
    PLUGIN = "@plugin"
    TAILWIND = "@tailwind"
    CUSTOM_VARIANT = "@custom-variant"
    THEME = "@theme"


# Lower rank = expected earlier in the stylesheet.
DIRECTIVE_PRIORITIES: dict[DirectiveKind, int] = {
    DirectiveKind.IMPORT: 1,
    DirectiveKind.SOURCE: 2,
    DirectiveKind.PLUGIN: 3,
    DirectiveKind.TAILWIND: 4,
    DirectiveKind.CUSTOM_VARIANT: 5,
    DirectiveKind.THEME: 6,
}


def priority_of(kind: DirectiveKind) -> float:
    """Return the ordering rank of *kind*; unlisted kinds sort last."""
    return DIRECTIVE_PRIORITIES.get(kind, math.inf)


@dataclass(frozen=True)
class Directive:
    """A single at-rule occurrence located in a stylesheet.

    Attributes:
        kind: Which at-rule matched.
        start: Offset of the ``@`` that opens the directive.
        end: Offset just past the terminating ``;`` or ``}``.
    """

    kind: DirectiveKind
    start: int
    end: int

    @property
    def span(self) -> tuple[int, int]:
        return (self.start, self.end)

    @property
    def priority(self) -> float:
        return priority_of(self.kind)

    def text(self, source: str) -> str:
        """Return the exact directive text out of *source*."""
        return source[self.start:self.end]
