"""Translate SharePoint payloads into domain entries."""

from __future__ import annotations

from collections.abc import Mapping
from logging import getLogger
from typing import TYPE_CHECKING, cast

import httpx
from pydantic import ValidationError

from versiontrail.domain.model import ArtifactEntry, VersionEntry
from versiontrail.domain.reconciliation.normalize import (
    normalize_display_label,
    normalize_join_label,
)

from .schema import FilePayload

if TYPE_CHECKING:
    from versiontrail.domain.model import BusinessKey, RecordIdentifier

    from .schema import FolderFilesResponse, ListItemsResponse, VersionHistoryResponse

log = getLogger(__name__)


def translate_identifier(
    response: ListItemsResponse,
    *,
    key: BusinessKey,
) -> RecordIdentifier | None:
    items = response.value
    if not items:
        return None
    if len(items) > 1:
        log.warning(
            "Business key %s matched %s records; using the first (id=%s)",
            key,
            len(items),
            items[0].id,
        )
    return items[0].id


def translate_versions(response: VersionHistoryResponse) -> tuple[VersionEntry, ...]:
    return tuple(
        VersionEntry(label=payload.label, version_id=payload.version_id, created=payload.created)
        for payload in response.value
    )


def translate_artifacts(
    response: FolderFilesResponse,
    *,
    site_url: str,
    version_field: str,
) -> tuple[ArtifactEntry, ...]:
    """Translate folder files, skipping entries that cannot be turned into a link."""

    artifacts: list[ArtifactEntry] = []
    for position, raw_file in enumerate(response.value):
        try:
            payload = FilePayload.model_validate(raw_file)
        except ValidationError as exc:
            log.warning(
                "Skipping malformed artifact #%s (%s): %s validation error(s)",
                position,
                _file_name(raw_file),
                exc.error_count(),
            )
            continue
        artifacts.append(
            translate_artifact(payload, site_url=site_url, version_field=version_field)
        )
    return tuple(artifacts)



def _file_name(raw_file: object) -> object:
    if isinstance(raw_file, Mapping):
        return cast(Mapping[str, object], raw_file).get("Name", "<unnamed>")
    return f"<{type(raw_file).__name__}>"

def translate_artifact(
    payload: FilePayload,
    *,
    site_url: str,
    version_field: str,
) -> ArtifactEntry:
    return ArtifactEntry(
        name=payload.name,
        url=absolute_url(site_url, payload.server_relative_url),
        display_version_label=normalize_display_label(payload.ui_version_label),
        join_version_label=normalize_join_label(payload.list_item_field(version_field)),
    )


def absolute_url(site_url: str, server_relative_url: str) -> str:
    """Combine the site's origin with a server-relative path.

    Server-relative paths already contain the site path (``/sites/x/...``), so only
    scheme and host are taken from ``site_url``. Paths without a leading slash are
    resolved against the site itself.
    """

    if server_relative_url.startswith(("http://", "https://")):
        return server_relative_url
    if server_relative_url.startswith("/"):
        return str(httpx.URL(site_url).join(server_relative_url))
    return str(httpx.URL(site_url.rstrip("/") + "/").join(server_relative_url))
