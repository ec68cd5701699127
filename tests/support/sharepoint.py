"""Canned SharePoint payloads and an in-memory HTTP stub."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

import httpx

from versiontrail.adapters.http_resilience import ResilientClient

if TYPE_CHECKING:
    from collections.abc import Callable

    from versiontrail.config.http_resilience import ResilienceConfig

SharePointPayload = dict[str, object]
FIXTURES = Path(__file__).resolve().parents[1] / "data" / "sharepoint"
SITE_URL = "https://contoso.sharepoint.com/sites/mis"

ITEMS_PATH = "/sites/mis/_api/web/lists/getbytitle('MIS_Upload_File')/items"
VERSIONS_PATH = "/sites/mis/_api/web/lists/getbytitle('MIS_Upload_File')/items(42)/versions"
FILES_PATH = "/sites/mis/_api/web/GetFolderByServerRelativePath(decodedurl=@folder)/Files"


def load_payload(name: str) -> SharePointPayload:
    return json.loads((FIXTURES / name).read_text())


@dataclass
class SharePointStub:
    """Route requests by path to canned responses and remember what was asked."""

    routes: dict[str, tuple[int, object]] = field(default_factory=dict)
    requests: list[httpx.Request] = field(default_factory=list)

    def respond(self, path: str, *, status_code: int = 200, json: object = None) -> None:
        self.routes[path] = (status_code, json)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(status_code=404, json={"odata.error": {"code": "-1"}})
        status_code, payload = route
        return httpx.Response(status_code=status_code, json=payload)

    def paths(self) -> list[str]:
        return [request.url.path for request in self.requests]

    def client_factory(self) -> Callable[[ResilienceConfig], ResilientClient]:
        def factory(resilience: ResilienceConfig) -> ResilientClient:
            return ResilientClient(resilience, transport=httpx.MockTransport(self.handler))

        return factory
