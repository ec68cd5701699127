"""Pydantic models describing the SharePoint REST payloads."""

from __future__ import annotations

from collections.abc import Mapping
from typing import cast

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class SharePointBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


def _unwrap_verbose_collection(value: object) -> object:
    """Accept ``odata=verbose`` envelopes (``{"d": {"results": [...]}}``) as ``value``."""

    if isinstance(value, Mapping):
        mapping_value = cast(Mapping[str, object], value)
        if "value" not in mapping_value:
            envelope = mapping_value.get("d")
            if isinstance(envelope, Mapping) and "results" in envelope:
                return {"value": cast(Mapping[str, object], envelope)["results"]}
    return value


class ListItemPayload(SharePointBaseModel):
    id: int | str = Field(alias="Id")

    @model_validator(mode="before")
    @classmethod
    def _accept_upper_case_id(cls, value: object) -> object:
        if isinstance(value, Mapping):
            mapping_value = cast(Mapping[str, object], value)
            if "Id" not in mapping_value and "ID" in mapping_value:
                data: dict[str, object] = dict(mapping_value)
                data["Id"] = data["ID"]
                return data
        return value


class VersionPayload(SharePointBaseModel):
    label: str = Field(alias="VersionLabel", min_length=1)
    version_id: int | None = Field(default=None, alias="VersionId")
    created: str | None = Field(default=None, alias="Created")

    # informational fields: an odd value is dropped instead of failing the history
    @field_validator("version_id", mode="before")
    @classmethod
    def _lenient_version_id(cls, value: object) -> int | None:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        if isinstance(value, str) and value.strip().isascii() and value.strip().isdigit():
            return int(value)
        return None

    @field_validator("created", mode="before")
    @classmethod
    def _lenient_created(cls, value: object) -> str | None:
        return value if isinstance(value, str) else None



class FilePayload(SharePointBaseModel):
    name: str = Field(alias="Name", min_length=1)
    server_relative_url: str = Field(alias="ServerRelativeUrl", min_length=1)
    ui_version_label: str | float | None = Field(default=None, alias="UIVersionLabel")
    list_item_fields: dict[str, object] | None = Field(default=None, alias="ListItemAllFields")

    def list_item_field(self, name: str) -> object:
        if self.list_item_fields is None:
            return None
        return self.list_item_fields.get(name)


class SharePointCollection(SharePointBaseModel):
    @model_validator(mode="before")
    @classmethod
    def _unwrap(cls, value: object) -> object:
        return _unwrap_verbose_collection(value)


class ListItemsResponse(SharePointCollection):
    value: list[ListItemPayload]


class VersionHistoryResponse(SharePointCollection):
    value: list[VersionPayload]


class FolderFilesResponse(SharePointCollection):
    # entries are validated one by one so a single bad file can be skipped
    value: list[object]


class ErrorDetail(SharePointBaseModel):
    code: str | None = None
    message: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _flatten_message(cls, value: object) -> object:
        # verbose responses nest the text as {"message": {"lang": ..., "value": ...}}
        if isinstance(value, Mapping):
            data: dict[str, object] = dict(cast(Mapping[str, object], value))
            message = data.get("message")
            if isinstance(message, Mapping):
                data["message"] = cast(Mapping[str, object], message).get("value")
            return data
        return value


class ErrorResponse(SharePointBaseModel):
    error: ErrorDetail = Field(alias="odata.error")

    @model_validator(mode="before")
    @classmethod
    def _accept_verbose_error(cls, value: object) -> object:
        if isinstance(value, Mapping):
            mapping_value = cast(Mapping[str, object], value)
            if "odata.error" not in mapping_value and "error" in mapping_value:
                return {"odata.error": mapping_value["error"]}
        return value
