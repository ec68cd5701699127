"""Application orchestration entry points."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING

from versiontrail.adapters.sharepoint import SharePointClient, SharePointRecordGateway
from versiontrail.config.http_resilience import ResilienceConfig
from versiontrail.config.sharepoint import get_sharepoint_config
from versiontrail.domain.reconciliation import ReconciliationEngine

if TYPE_CHECKING:
    from versiontrail.adapters.http_resilience import ResilientClient
    from versiontrail.config.sharepoint import SharePointConfig
    from versiontrail.domain.model import BusinessKey
    from versiontrail.domain.result import ReconciliationResult

ClientFactory = Callable[[ResilienceConfig], "ResilientClient"]


log = getLogger(__name__)


def reconcile_record_versions(
    key: BusinessKey | None,
    *,
    config: SharePointConfig | None = None,
    client_factory: ClientFactory | None = None,
) -> ReconciliationResult:
    """Reconcile the version history of ``key`` with its artifacts on SharePoint."""

    return asyncio.run(
        reconcile_record_versions_async(key, config=config, client_factory=client_factory)
    )


async def reconcile_record_versions_async(
    key: BusinessKey | None,
    *,
    config: SharePointConfig | None = None,
    client_factory: ClientFactory | None = None,
) -> ReconciliationResult:
    effective_config = config or get_sharepoint_config()
    log.debug(
        "Using site %s (list=%s, library=%s)",
        effective_config.site_url,
        effective_config.list_title,
        effective_config.attachment_library,
    )
    async with SharePointClient(config=effective_config, client_factory=client_factory) as client:
        engine = ReconciliationEngine(gateway=SharePointRecordGateway(client=client))
        return await engine.reconcile(key)
