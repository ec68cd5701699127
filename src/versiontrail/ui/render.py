"""Plain-text presentation of reconciliation results."""

from __future__ import annotations

from typing import TYPE_CHECKING, assert_never

from versiontrail.domain.result import ErrorKind, ReconciliationFailure, ReconciliationSuccess

if TYPE_CHECKING:
    from versiontrail.domain.model import BusinessKey, ReconciledVersion
    from versiontrail.domain.result import ReconciliationResult

NO_ATTACHMENT_TEXT = "No attachments"

_FAILURE_MESSAGES = {
    ErrorKind.INVALID_INPUT: "Business key not provided",
    ErrorKind.RECORD_NOT_FOUND: "List item not found",
    ErrorKind.TRANSPORT_ERROR: "Error retrieving data",
}


def render_result(result: ReconciliationResult, *, key: BusinessKey | None = None) -> str:
    match result:
        case ReconciliationSuccess(versions=versions):
            return _render_versions(versions, key=key)
        case ReconciliationFailure(reason=reason):
            return _FAILURE_MESSAGES[reason]
        case _:
            assert_never(result)


def render_version(version: ReconciledVersion) -> str:
    if version.attachment_url is None:
        return f"Version {version.label} - {NO_ATTACHMENT_TEXT}"
    return f"Version {version.label} - {version.attachment_url}"


def _render_versions(versions: tuple[ReconciledVersion, ...], *, key: BusinessKey | None) -> str:
    heading = f"Version history for {key}" if key else "Version history"
    if not versions:
        return f"{heading}\n(no versions)"
    return "\n".join([heading, *(render_version(version) for version in versions)])
