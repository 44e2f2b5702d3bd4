"""Outcome of an import merge."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ImportStatus(Enum):
    ADDED = "added"
    EXISTS = "exists"


@dataclass(frozen=True)
class ImportResult:
    """Returned by ``add_import``: what happened and the resulting text."""

    status: ImportStatus
    text: str

    @property
    def added(self) -> bool:
        return self.status is ImportStatus.ADDED
