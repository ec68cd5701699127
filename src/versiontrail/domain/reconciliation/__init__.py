"""Reconciliation of record version history with stored artifacts."""

from __future__ import annotations

from .engine import ReconciliationEngine, is_valid_key
from .join import index_artifacts_by_label, join_versions
from .normalize import normalize_artifacts, normalize_display_label, normalize_join_label

__all__ = [
    "ReconciliationEngine",
    "index_artifacts_by_label",
    "is_valid_key",
    "join_versions",
    "normalize_artifacts",
    "normalize_display_label",
    "normalize_join_label",
]
