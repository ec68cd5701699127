"""Request-scoped value types for record version reconciliation.

Everything here is immutable and built fresh for every reconciliation. Adapters
translate raw remote payloads into these types; nothing untyped travels past the
gateway boundary.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal

type BusinessKey = str
type RecordIdentifier = int | str

DISPLAY_LABEL_UNAVAILABLE = "N/A"


class VersionSentinel(Enum):
    """Join key for artifacts without a usable version number.

    A plain ``Enum`` member never compares equal to a ``str``, so an artifact
    carrying it cannot match any version label.
    """

    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return DISPLAY_LABEL_UNAVAILABLE


UNKNOWN_VERSION = VersionSentinel.UNKNOWN

type JoinLabel = str | Literal[VersionSentinel.UNKNOWN]


@dataclass(frozen=True, slots=True)
class VersionEntry:
    """One point in a record's version history; only ``label`` drives the join."""

    label: str
    version_id: int | None = None
    created: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ArtifactEntry:
    """A file stored in the record's artifact folder."""

    name: str
    url: str
    display_version_label: str = DISPLAY_LABEL_UNAVAILABLE
    join_version_label: JoinLabel = UNKNOWN_VERSION

    @property
    def has_join_label(self) -> bool:
        return self.join_version_label is not UNKNOWN_VERSION


@dataclass(frozen=True, slots=True)
class ReconciledVersion:
    """A history entry paired with at most one artifact.

    ``attachment_url`` is ``None`` when no artifact carries this version's label.
    """

    label: str
    attachment_url: str | None = None
    attachment_name: str | None = None

    @property
    def has_attachment(self) -> bool:
        return self.attachment_url is not None
