"""Merging a ``@theme { ... }`` block into a stylesheet."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from tailmerge.merge.imports import add_import

__all__ = [
    "add_import_and_theme",
    "ensure_theme_exists",
    "normalize_theme",
    "read_theme_content",
]

logger = logging.getLogger(__name__)

# Looser than the directive parser: accepts word modifiers between the keyword
# and "{" (e.g. "@theme inline {"), and swallows the blank lines around the
# block.
_EXISTING_THEME_RE = re.compile(r"\s*@theme(?:\s+[\w-]+)*\s*\{[^}]*\}\s*")


def normalize_theme(theme: str) -> str:
    """Strip trailing whitespace per line and around the whole block."""
    return "\n".join(line.rstrip() for line in theme.split("\n")).strip()


def ensure_theme_exists(css: str, theme: str) -> str:
    """Replace the first ``@theme`` block in *css* with *theme*, or append it.

    Only the first block is rewritten; any later ``@theme`` blocks are left
    as they are.
    """
    theme = normalize_theme(theme)

    if "@theme" in css:
        updated, count = _EXISTING_THEME_RE.subn(
            lambda _match: f"\n\n{theme}\n", css, count=1
        )
        if count:
            logger.debug("Replaced existing @theme block")
            return updated
        logger.debug("Found '@theme' text but no block; appending instead")

    separator = "\n" if css.endswith("\n") else "\n\n"
    logger.debug("Appending @theme block")
    return f"{css.rstrip()}{separator}{theme}\n"


def add_import_and_theme(css: str, import_path: str, theme: str) -> str:
    """Ensure *css* imports *import_path* and carries *theme*.

    Raises:
        ParseError: if the import could not be merged.
    """
    result = add_import(css, import_path)
    logger.debug("Import %r: %s", import_path, result.status.value)
    return ensure_theme_exists(result.text, theme)


def read_theme_content(path: str | Path) -> str:
    """Read a theme file. ``OSError`` from the file system propagates as-is."""
    return Path(path).read_text(encoding="utf-8")
