"""HTTP client for the SharePoint REST API."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Self

import httpx
from pydantic import BaseModel, ValidationError

from versiontrail.adapters.http_resilience import ResilientClient

from .schema import (
    ErrorResponse,
    FolderFilesResponse,
    ListItemsResponse,
    VersionHistoryResponse,
)

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

    from versiontrail.config.http_resilience import ResilienceConfig
    from versiontrail.config.sharepoint import SharePointConfig
    from versiontrail.domain.model import BusinessKey, RecordIdentifier

log = getLogger(__name__)


class SharePointAPIError(RuntimeError):
    """Raised when SharePoint returns an error or an unexpected payload."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def odata_literal(value: str) -> str:
    """Quote ``value`` as an OData string literal."""

    return "'" + value.replace("'", "''") + "'"


class SharePointClient:
    """Low-level HTTP client for list items, item versions and folder files.

    One underlying HTTP client is opened per ``async with`` block and shared by
    every request made inside it.
    """

    def __init__(
        self,
        *,
        config: SharePointConfig,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self.config = config
        self._client_factory = client_factory or ResilientClient
        self._client: ResilientClient | None = None

    async def __aenter__(self) -> Self:
        self._client = self._client_factory(self.config.resilience)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        client, self._client = self._client, None
        if client is not None:
            await client.aclose()

    async def find_items(self, key: BusinessKey) -> ListItemsResponse:
        params = {
            "$filter": f"{self.config.key_field} eq {odata_literal(key)}",
            "$select": "Id",
        }
        return await self._get_collection(
            f"{self._list_path()}/items",
            params=params,
            model=ListItemsResponse,
        )

    async def fetch_item_versions(self, item_id: RecordIdentifier) -> VersionHistoryResponse:
        return await self._get_collection(
            f"{self._list_path()}/items({item_id})/versions",
            params=None,
            model=VersionHistoryResponse,
        )

    async def fetch_folder_files(self, key: BusinessKey) -> FolderFilesResponse:
        folder = f"{self.config.attachment_library}/{key}"
        version_field = self.config.version_field
        # the key travels as an aliased query parameter so it never touches the URL path
        params = {
            "@folder": odata_literal(folder),
            "$expand": "ListItemAllFields",
            "$select": ",".join(
                (
                    "Name",
                    "ServerRelativeUrl",
                    "UIVersionLabel",
                    f"ListItemAllFields/{version_field}",
                    "ListItemAllFields/ID",
                )
            ),
        }
        return await self._get_collection(
            "/_api/web/GetFolderByServerRelativePath(decodedurl=@folder)/Files",
            params=params,
            model=FolderFilesResponse,
        )

    def _list_path(self) -> str:
        return f"/_api/web/lists/getbytitle({odata_literal(self.config.list_title)})"

    async def _get_collection[M: BaseModel](
        self,
        path: str,
        *,
        params: dict[str, str] | None,
        model: type[M],
    ) -> M:
        if self._client is None:
            raise RuntimeError("SharePointClient must be used inside 'async with'")

        response = await self._client.get(path, params=params)
        if response.is_error:
            self._raise_for_error(response)

        try:
            payload = response.json()
        except ValueError as exc:
            raise SharePointAPIError(
                f"SharePoint returned a non-JSON body for {path}",
                status_code=response.status_code,
            ) from exc

        if not isinstance(payload, dict):
            raise SharePointAPIError(f"Unexpected SharePoint response payload for {path}")

        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            raise SharePointAPIError(
                f"SharePoint response for {path} is missing its 'value' collection "
                f"or is malformed: {exc.error_count()} validation error(s)",
                status_code=response.status_code,
            ) from exc

    def _raise_for_error(self, response: httpx.Response) -> None:
        try:
            error_payload = ErrorResponse.model_validate(response.json())
        except (ValueError, ValidationError):
            response.raise_for_status()
            return
        log.error(
            "SharePoint API error %s (%s): %s",
            response.status_code,
            error_payload.error.code,
            error_payload.error.message,
        )
        raise SharePointAPIError(
            error_payload.error.message or f"HTTP {response.status_code}",
            status_code=response.status_code,
        )
