"""Orchestrator for record version reconciliation.

The engine runs the gateway calls in dependency order and turns their outcome
into exactly one :data:`ReconciliationResult`:

1) validate the business key (no remote call for an empty key)
2) resolve the key to a record identifier
3) fetch version history and artifacts concurrently
4) normalize artifact join labels
5) join history with artifacts, preserving history order

Every intermediate collection is local to one ``reconcile`` call, so a single
engine may serve concurrent requests.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from versiontrail.domain.ports.gateway import TransportError
from versiontrail.domain.result import (
    ErrorKind,
    ReconciliationFailure,
    ReconciliationSuccess,
)

from .join import join_versions
from .normalize import normalize_artifacts

if TYPE_CHECKING:
    from versiontrail.domain.model import (
        ArtifactEntry,
        BusinessKey,
        RecordIdentifier,
        VersionEntry,
    )
    from versiontrail.domain.ports.gateway import RecordGateway
    from versiontrail.domain.result import ReconciliationResult

log = getLogger(__name__)


def is_valid_key(key: object) -> bool:
    return isinstance(key, str) and bool(key)


@dataclass(slots=True)
class ReconciliationEngine:
    """Reconcile a record's version history with its stored artifacts."""

    gateway: RecordGateway

    async def reconcile(self, key: BusinessKey | None) -> ReconciliationResult:
        """Run all reconciliation stages for ``key``.

        Cancelling the awaiting task cancels in-flight gateway calls and raises
        ``asyncio.CancelledError``; no partial result is produced.
        """

        if key is None or not is_valid_key(key):
            log.warning("Rejecting reconciliation request with empty business key")
            return ReconciliationFailure(ErrorKind.INVALID_INPUT, "Business key is empty")

        log.info("Reconciling versions for %s", key)
        try:
            identifier = await self.gateway.resolve_identifier(key)
        except TransportError as exc:
            log.error("Record lookup failed for %s: %s", key, exc)  # noqa: TRY400
            return ReconciliationFailure(ErrorKind.TRANSPORT_ERROR, str(exc))

        if identifier is None:
            log.info("No record matches business key %s", key)
            return ReconciliationFailure(
                ErrorKind.RECORD_NOT_FOUND, f"No record matches business key {key!r}"
            )

        try:
            history, artifacts = await self._fetch_history_and_artifacts(key, identifier)
        except TransportError as exc:
            log.error("Fetching history or artifacts failed for %s: %s", key, exc)  # noqa: TRY400
            return ReconciliationFailure(ErrorKind.TRANSPORT_ERROR, str(exc))

        versions = join_versions(history, normalize_artifacts(artifacts))
        attached = sum(1 for version in versions if version.has_attachment)
        log.info(
            "Reconciled %s: versions=%s, artifacts=%s, attached=%s",
            key,
            len(versions),
            len(artifacts),
            attached,
        )
        return ReconciliationSuccess(versions=versions)

    async def _fetch_history_and_artifacts(
        self,
        key: BusinessKey,
        identifier: RecordIdentifier,
    ) -> tuple[tuple[VersionEntry, ...], tuple[ArtifactEntry, ...]]:
        # history is addressed by identifier, the artifact folder by the raw key
        try:
            async with asyncio.TaskGroup() as group:
                history_task = group.create_task(self.gateway.fetch_version_history(identifier))
                artifacts_task = group.create_task(self.gateway.fetch_artifacts(key))
        except ExceptionGroup as errors:
            matched, rest = errors.split(TransportError)
            if matched is None or rest is not None:
                raise
            raise matched.exceptions[0]  # noqa: B904
        return history_task.result(), artifacts_task.result()
