"""tailmerge - directive-aware merging of imports and themes into Tailwind stylesheets."""

from tailmerge.model import (
    DIRECTIVE_PRIORITIES,
    Diagnostic,
    Directive,
    DirectiveKind,
    ImportResult,
    ImportStatus,
    Severity,
)
from tailmerge.parser import ParseError, parse_directives
from tailmerge.merge import (
    add_import,
    add_import_and_theme,
    ensure_theme_exists,
    import_exists,
    insert_import,
    read_theme_content,
)
from tailmerge.validation import validate, validate_tailwind_order

__version__ = "0.1.0"

__all__ = [
    "DIRECTIVE_PRIORITIES",
    "Diagnostic",
    "Directive",
    "DirectiveKind",
    "ImportResult",
    "ImportStatus",
    "ParseError",
    "Severity",
    "add_import",
    "add_import_and_theme",
    "ensure_theme_exists",
    "import_exists",
    "insert_import",
    "parse_directives",
    "read_theme_content",
    "validate",
    "validate_tailwind_order",
]
