"""Idempotent insertion of ``@import`` statements into a stylesheet."""

from __future__ import annotations

import logging
import re

from tailmerge.model.directive import Directive, DirectiveKind
from tailmerge.model.result import ImportResult, ImportStatus
from tailmerge.parser.directives import parse_directives
from tailmerge.parser.errors import ParseError

__all__ = [
    "add_import",
    "find_insertion_point",
    "import_exists",
    "import_statement",
    "insert_at",
    "insert_import",
    "normalize_import_path",
]

logger = logging.getLogger(__name__)

_REPEATED_SLASHES_RE = re.compile(r"/+")


def normalize_import_path(path: str) -> str:
    """Forward slashes, no repeated separators, no surrounding whitespace.

    Only used to compare paths; output always keeps the path as written.
    """
    return _REPEATED_SLASHES_RE.sub("/", path.strip().replace("\\", "/"))


def import_statement(import_path: str) -> str:
    return f'@import "{import_path}";'


def _import_patterns(path: str) -> list[re.Pattern[str]]:
    escaped = re.escape(path)
    return [
        re.compile(rf"""@import\s+["']{escaped}["'](\s+[^;]*)?;""", re.IGNORECASE),
        re.compile(
            rf"""@import\s+url\(["']?{escaped}["']?\)(\s+[^;]*)?;""", re.IGNORECASE
        ),
    ]


def import_exists(css: str, import_path: str) -> bool:
    """Return True if *css* already imports *import_path*.

    Quoted and ``url(...)`` forms both count, and the comparison tolerates
    backslashes or doubled slashes on either side.
    """
    normalized_css = normalize_import_path(css)
    candidates = list(dict.fromkeys([import_path, normalize_import_path(import_path)]))
    for candidate in candidates:
        for pattern in _import_patterns(candidate):
            if pattern.search(css) or pattern.search(normalized_css):
                return True
    return False


def find_insertion_point(directives: list[Directive]) -> int | None:
    """Offset where a new import belongs, or None to prepend.

    After the last existing import; failing that, after the first directive
    carrying the best (lowest) priority rank.
    """
    imports = [d for d in directives if d.kind is DirectiveKind.IMPORT]
    if imports:
        return imports[-1].end
    if directives:
        return min(directives, key=lambda d: d.priority).end
    return None


def insert_at(css: str, statement: str, position: int) -> str:
    """Splice *statement* onto its own line at *position*.

    Whitespace around the cut is collapsed so repeated runs never pile up
    blank lines; a statement landing at the end is newline-terminated.
    """
    before = css[:position].rstrip()
    after = css[position:].lstrip()
    return f"{before}\n{statement}\n{after}"


def insert_import(css: str, import_path: str) -> str:
    """Insert ``@import "<import_path>";`` without checking for duplicates."""
    statement = import_statement(import_path)
    position = find_insertion_point(parse_directives(css))

    if position is None:
        logger.debug("No directives found; prepending %s", statement)
        if not css.strip():
            return statement + "\n"
        return f"{statement}\n\n{css}"

    logger.debug("Inserting %s at offset %d", statement, position)
    return insert_at(css, statement, position)


def add_import(css: str, import_path: str) -> ImportResult:
    """Add an import of *import_path* to *css* unless one is already present.

    The input is trimmed first. Returns an :class:`ImportResult` whose status
    tells whether anything changed.

    Raises:
        ParseError: if the text could not be processed.
    """
    try:
        css = css.strip()
        if import_exists(css, import_path):
            logger.debug("Import %r already present", import_path)
            return ImportResult(status=ImportStatus.EXISTS, text=css)
        return ImportResult(
            status=ImportStatus.ADDED, text=insert_import(css, import_path)
        )
    except Exception as exc:
        raise ParseError(f"Failed to parse CSS: {exc!r}") from exc
