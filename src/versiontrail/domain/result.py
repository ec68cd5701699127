"""Outcome of a reconciliation request."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .model import ReconciledVersion


class ErrorKind(StrEnum):
    INVALID_INPUT = "invalid_input"
    RECORD_NOT_FOUND = "record_not_found"
    TRANSPORT_ERROR = "transport_error"


@dataclass(frozen=True, slots=True)
class ReconciliationSuccess:
    versions: tuple[ReconciledVersion, ...] = ()

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class ReconciliationFailure:
    reason: ErrorKind
    detail: str | None = None

    @property
    def ok(self) -> bool:
        return False


type ReconciliationResult = ReconciliationSuccess | ReconciliationFailure
