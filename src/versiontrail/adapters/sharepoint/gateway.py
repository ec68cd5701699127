"""SharePoint implementation of the record gateway port."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

import httpx

from versiontrail.domain.ports.gateway import TransportError

from .client import SharePointAPIError
from .translator import translate_artifacts, translate_identifier, translate_versions

if TYPE_CHECKING:
    from collections.abc import Iterator

    from versiontrail.domain.model import (
        ArtifactEntry,
        BusinessKey,
        RecordIdentifier,
        VersionEntry,
    )
    from versiontrail.domain.ports.gateway import RecordGateway

    from .client import SharePointClient

log = getLogger(__name__)


@contextmanager
def _transport_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except httpx.HTTPStatusError as exc:
        raise TransportError(
            f"{operation} failed with HTTP {exc.response.status_code}"
        ) from exc
    except httpx.TimeoutException as exc:
        raise TransportError(f"{operation} timed out") from exc
    except httpx.HTTPError as exc:
        raise TransportError(f"{operation} failed: {exc}") from exc
    except httpx.InvalidURL as exc:
        raise TransportError(f"{operation} could not build a request URL: {exc}") from exc
    except SharePointAPIError as exc:
        raise TransportError(f"{operation} failed: {exc}") from exc


@dataclass(slots=True)
class SharePointRecordGateway:
    """Record lookups, version history and artifact folders on one SharePoint site."""

    client: SharePointClient

    async def resolve_identifier(self, key: BusinessKey) -> RecordIdentifier | None:
        with _transport_errors(f"Record lookup for {key!r}"):
            response = await self.client.find_items(key)
        identifier = translate_identifier(response, key=key)
        log.debug("Resolved %s to record %s", key, identifier)
        return identifier

    async def fetch_version_history(
        self, identifier: RecordIdentifier
    ) -> tuple[VersionEntry, ...]:
        with _transport_errors(f"Version history for record {identifier}"):
            response = await self.client.fetch_item_versions(identifier)
        return translate_versions(response)

    async def fetch_artifacts(self, key: BusinessKey) -> tuple[ArtifactEntry, ...]:
        with _transport_errors(f"Artifact listing for {key!r}"):
            response = await self.client.fetch_folder_files(key)
        config = self.client.config
        artifacts = translate_artifacts(
            response,
            site_url=config.site_url,
            version_field=config.version_field,
        )
        skipped = len(response.value) - len(artifacts)
        if skipped:
            log.warning("Skipped %s malformed artifact(s) for %s", skipped, key)
        return artifacts


if TYPE_CHECKING:
    _gateway_check: RecordGateway = SharePointRecordGateway(client=...)  # pyright: ignore[reportArgumentType]
