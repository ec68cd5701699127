"""Port for the remote record store."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from versiontrail.domain.model import (
        ArtifactEntry,
        BusinessKey,
        RecordIdentifier,
        VersionEntry,
    )


class TransportError(RuntimeError):
    """Raised by gateways when a remote call fails or returns malformed data."""


@runtime_checkable
class RecordGateway(Protocol):
    """Read-only queries against the record store.

    Implementations raise :class:`TransportError` for every remote failure and
    never retry.
    """

    async def resolve_identifier(self, key: BusinessKey) -> RecordIdentifier | None:
        """Return the record identifier for ``key`` or ``None`` when nothing matches."""
        ...

    async def fetch_version_history(
        self, identifier: RecordIdentifier
    ) -> tuple[VersionEntry, ...]:
        """Return the record's versions in the order the store reports them."""
        ...

    async def fetch_artifacts(self, key: BusinessKey) -> tuple[ArtifactEntry, ...]:
        """Return the files filed under ``key``; an empty folder is a valid result."""
        ...


__all__ = ["RecordGateway", "TransportError"]
