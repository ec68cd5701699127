from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import httpx
import pytest

from tests.support.sharepoint import FILES_PATH, ITEMS_PATH, VERSIONS_PATH, SharePointStub
from versiontrail.adapters.http_resilience import ResilientClient
from versiontrail.adapters.sharepoint import SharePointClient, SharePointRecordGateway
from versiontrail.domain.ports import RecordGateway, TransportError

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from versiontrail.config.http_resilience import ResilienceConfig
    from versiontrail.config.sharepoint import SharePointConfig


def _run[T](
    config: SharePointConfig,
    client_factory: Callable[[ResilienceConfig], ResilientClient],
    call: Callable[[SharePointRecordGateway], Awaitable[T]],
) -> T:
    async def scenario() -> T:
        async with SharePointClient(config=config, client_factory=client_factory) as client:
            return await call(SharePointRecordGateway(client=client))

    return asyncio.run(scenario())


def test_gateway_satisfies_port(sharepoint_config: SharePointConfig) -> None:
    gateway = SharePointRecordGateway(client=SharePointClient(config=sharepoint_config))

    assert isinstance(gateway, RecordGateway)


def test_gateway_resolves_identifier(
    sharepoint_config: SharePointConfig,
    sharepoint_stub: SharePointStub,
) -> None:
    identifier = _run(
        sharepoint_config,
        sharepoint_stub.client_factory(),
        lambda gateway: gateway.resolve_identifier("NDC123"),
    )

    assert identifier == 42


def test_gateway_returns_none_for_unknown_key(sharepoint_config: SharePointConfig) -> None:
    stub = SharePointStub()
    stub.respond(ITEMS_PATH, json={"value": []})

    identifier = _run(
        sharepoint_config,
        stub.client_factory(),
        lambda gateway: gateway.resolve_identifier("NDC123"),
    )

    assert identifier is None


def test_gateway_fetches_artifacts_and_skips_malformed(
    sharepoint_config: SharePointConfig,
    sharepoint_stub: SharePointStub,
) -> None:
    artifacts = _run(
        sharepoint_config,
        sharepoint_stub.client_factory(),
        lambda gateway: gateway.fetch_artifacts("NDC123"),
    )

    assert len(artifacts) == 4
    assert all(artifact.url.startswith("https://contoso.sharepoint.com/") for artifact in artifacts)


def test_gateway_wraps_status_errors(sharepoint_config: SharePointConfig) -> None:
    stub = SharePointStub()
    stub.respond(VERSIONS_PATH, status_code=500, json="boom")

    with pytest.raises(TransportError, match="HTTP 500") as exc:
        _run(
            sharepoint_config,
            stub.client_factory(),
            lambda gateway: gateway.fetch_version_history(42),
        )

    assert isinstance(exc.value.__cause__, httpx.HTTPStatusError)


def test_gateway_wraps_missing_collection(sharepoint_config: SharePointConfig) -> None:
    stub = SharePointStub()
    stub.respond(FILES_PATH, json={"error": None, "items": []})

    with pytest.raises(TransportError, match="Artifact listing"):
        _run(
            sharepoint_config,
            stub.client_factory(),
            lambda gateway: gateway.fetch_artifacts("NDC123"),
        )


def test_gateway_wraps_malformed_history(sharepoint_config: SharePointConfig) -> None:
    stub = SharePointStub()
    stub.respond(VERSIONS_PATH, json={"value": [{"VersionId": 1}]})

    with pytest.raises(TransportError, match="Version history"):
        _run(
            sharepoint_config,
            stub.client_factory(),
            lambda gateway: gateway.fetch_version_history(42),
        )


def test_gateway_wraps_timeouts(sharepoint_config: SharePointConfig) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    def factory(resilience: ResilienceConfig) -> ResilientClient:
        return ResilientClient(resilience, transport=httpx.MockTransport(handler))

    with pytest.raises(TransportError, match="timed out"):
        _run(sharepoint_config, factory, lambda gateway: gateway.resolve_identifier("NDC123"))


def test_gateway_wraps_connection_errors(sharepoint_config: SharePointConfig) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    def factory(resilience: ResilienceConfig) -> ResilientClient:
        return ResilientClient(resilience, transport=httpx.MockTransport(handler))

    with pytest.raises(TransportError, match="connection refused"):
        _run(sharepoint_config, factory, lambda gateway: gateway.fetch_artifacts("NDC123"))


def test_gateway_skips_non_object_files(sharepoint_config: SharePointConfig) -> None:
    stub = SharePointStub()
    stub.respond(
        FILES_PATH,
        json={"value": [{"Name": "ok.pdf", "ServerRelativeUrl": "/sites/mis/ok.pdf"}, None, 5]},
    )

    artifacts = _run(
        sharepoint_config,
        stub.client_factory(),
        lambda gateway: gateway.fetch_artifacts("NDC123"),
    )

    assert [artifact.name for artifact in artifacts] == ["ok.pdf"]


def test_gateway_keeps_history_with_odd_informational_fields(
    sharepoint_config: SharePointConfig,
) -> None:
    stub = SharePointStub()
    stub.respond(
        VERSIONS_PATH,
        json={"value": [{"VersionLabel": "1.0", "VersionId": "x", "Created": 5}]},
    )

    history = _run(
        sharepoint_config,
        stub.client_factory(),
        lambda gateway: gateway.fetch_version_history(42),
    )

    assert [entry.label for entry in history] == ["1.0"]


def test_gateway_wraps_invalid_urls(sharepoint_config: SharePointConfig) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.InvalidURL("Invalid non-printable ASCII character in URL")

    def factory(resilience: ResilienceConfig) -> ResilientClient:
        return ResilientClient(resilience, transport=httpx.MockTransport(handler))

    with pytest.raises(TransportError, match="could not build a request URL") as exc:
        _run(sharepoint_config, factory, lambda gateway: gateway.fetch_artifacts("NDC\x00"))

    assert isinstance(exc.value.__cause__, httpx.InvalidURL)


def test_gateway_fetches_artifacts_for_keys_with_reserved_characters(
    sharepoint_config: SharePointConfig,
) -> None:
    stub = SharePointStub()
    stub.respond(
        FILES_PATH,
        json={
            "value": [
                {
                    "Name": "a.pdf",
                    "ServerRelativeUrl": "/sites/mis/MIS_Attachment/NDC%3F1%232/a.pdf",
                    "ListItemAllFields": {"Version_number": "1.0"},
                }
            ]
        },
    )

    artifacts = _run(
        sharepoint_config,
        stub.client_factory(),
        lambda gateway: gateway.fetch_artifacts("NDC?1#2"),
    )

    assert [artifact.join_version_label for artifact in artifacts] == ["1.0"]
    assert stub.requests[0].url.params["@folder"] == "'MIS_Attachment/NDC?1#2'"
