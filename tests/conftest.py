"""Shared fixtures: SharePoint configuration and a stubbed site."""

from __future__ import annotations

import pytest

from tests.support.sharepoint import (
    FILES_PATH,
    ITEMS_PATH,
    SITE_URL,
    VERSIONS_PATH,
    SharePointPayload,
    SharePointStub,
    load_payload,
)
from versiontrail.config.sharepoint import SharePointConfig, build_resilience_config


@pytest.fixture
def sharepoint_config() -> SharePointConfig:
    return SharePointConfig(
        site_url=SITE_URL,
        resilience=build_resilience_config(SITE_URL, access_token="test-token"),
    )


@pytest.fixture
def list_items_payload() -> SharePointPayload:
    return load_payload("list_items.json")


@pytest.fixture
def item_versions_payload() -> SharePointPayload:
    return load_payload("item_versions.json")


@pytest.fixture
def folder_files_payload() -> SharePointPayload:
    return load_payload("folder_files.json")


@pytest.fixture
def sharepoint_stub(
    list_items_payload: SharePointPayload,
    item_versions_payload: SharePointPayload,
    folder_files_payload: SharePointPayload,
) -> SharePointStub:
    stub = SharePointStub()
    stub.respond(ITEMS_PATH, json=list_items_payload)
    stub.respond(VERSIONS_PATH, json=item_versions_payload)
    stub.respond(FILES_PATH, json=folder_files_payload)
    return stub
