"""SharePoint record store adapter."""

from __future__ import annotations

from .client import SharePointAPIError, SharePointClient
from .gateway import SharePointRecordGateway
from .schema import (
    FilePayload,
    FolderFilesResponse,
    ListItemsResponse,
    VersionHistoryResponse,
    VersionPayload,
)
from .translator import absolute_url, translate_artifacts, translate_identifier, translate_versions

__all__ = [
    "FilePayload",
    "FolderFilesResponse",
    "ListItemsResponse",
    "SharePointAPIError",
    "SharePointClient",
    "SharePointRecordGateway",
    "VersionHistoryResponse",
    "VersionPayload",
    "absolute_url",
    "translate_artifacts",
    "translate_identifier",
    "translate_versions",
]
