"""SharePoint record store configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_var, optional_float_env_var, require_env_var
from .errors import ConfigurationError
from .http_resilience import RateLimit, ResilienceConfig

DEFAULT_LIST_TITLE = "MIS_Upload_File"
DEFAULT_KEY_FIELD = "NDCCode"
DEFAULT_ATTACHMENT_LIBRARY = "MIS_Attachment"
DEFAULT_VERSION_FIELD = "Version_number"
DEFAULT_TIMEOUT_SECONDS = 30.0

# nometadata keeps the payload to the bare ``value`` collection
ODATA_ACCEPT = "application/json;odata=nometadata"


@dataclass(frozen=True, slots=True)
class SharePointConfig:
    """Where records, their version history and their artifacts live."""

    site_url: str
    resilience: ResilienceConfig
    list_title: str = DEFAULT_LIST_TITLE
    key_field: str = DEFAULT_KEY_FIELD
    attachment_library: str = DEFAULT_ATTACHMENT_LIBRARY
    version_field: str = DEFAULT_VERSION_FIELD


def build_resilience_config(
    site_url: str,
    *,
    access_token: str | None = None,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ratelimit: RateLimit | None = None,
) -> ResilienceConfig:
    headers = {"Accept": ODATA_ACCEPT}
    if access_token:
        headers["Authorization"] = f"Bearer {access_token}"
    return ResilienceConfig(
        name="sharepoint",
        base_url=normalize_site_url(site_url),
        timeout_seconds=timeout_seconds,
        ratelimit=ratelimit,
        default_headers=headers,
    )


def normalize_site_url(site_url: str) -> str:
    stripped = site_url.strip().rstrip("/")
    if not stripped.startswith(("http://", "https://")):
        raise ConfigurationError(f"SharePoint site URL must be absolute: {site_url!r}")
    return stripped


def get_sharepoint_config(*, resilience: ResilienceConfig | None = None) -> SharePointConfig:
    site_url = normalize_site_url(require_env_var("VERSIONTRAIL_SITE_URL"))
    effective_resilience = resilience or build_resilience_config(
        site_url,
        access_token=optional_env_var("VERSIONTRAIL_ACCESS_TOKEN"),
        timeout_seconds=optional_float_env_var(
            "VERSIONTRAIL_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS
        ),
        ratelimit=RateLimit(max_calls=10, per_seconds=1.0),
    )
    return SharePointConfig(
        site_url=site_url,
        resilience=effective_resilience,
        list_title=_setting("VERSIONTRAIL_LIST_TITLE", DEFAULT_LIST_TITLE),
        key_field=_setting("VERSIONTRAIL_KEY_FIELD", DEFAULT_KEY_FIELD),
        attachment_library=_setting("VERSIONTRAIL_ATTACHMENT_LIBRARY", DEFAULT_ATTACHMENT_LIBRARY),
        version_field=_setting("VERSIONTRAIL_VERSION_FIELD", DEFAULT_VERSION_FIELD),
    )


def _setting(name: str, default: str) -> str:
    return optional_env_var(name) or default
