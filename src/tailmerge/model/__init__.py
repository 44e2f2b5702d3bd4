from tailmerge.model.diagnostic import Diagnostic, Severity
from tailmerge.model.directive import (
    DIRECTIVE_PRIORITIES,
    Directive,
    DirectiveKind,
    priority_of,
)
from tailmerge.model.result import ImportResult, ImportStatus

__all__ = [
    "DIRECTIVE_PRIORITIES",
    "Diagnostic",
    "Directive",
    "DirectiveKind",
    "ImportResult",
    "ImportStatus",
    "Severity",
    "priority_of",
]
