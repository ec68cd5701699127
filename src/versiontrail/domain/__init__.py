"""Domain types and services for record version reconciliation."""

from __future__ import annotations

from .model import (
    UNKNOWN_VERSION,
    ArtifactEntry,
    BusinessKey,
    JoinLabel,
    ReconciledVersion,
    RecordIdentifier,
    VersionEntry,
    VersionSentinel,
)
from .result import (
    ErrorKind,
    ReconciliationFailure,
    ReconciliationResult,
    ReconciliationSuccess,
)

__all__ = [
    "UNKNOWN_VERSION",
    "ArtifactEntry",
    "BusinessKey",
    "ErrorKind",
    "JoinLabel",
    "ReconciledVersion",
    "ReconciliationFailure",
    "ReconciliationResult",
    "ReconciliationSuccess",
    "RecordIdentifier",
    "VersionEntry",
    "VersionSentinel",
]
