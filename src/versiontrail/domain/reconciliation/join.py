"""Join version history with artifacts on the version label."""

from __future__ import annotations

from typing import TYPE_CHECKING

from versiontrail.domain.model import UNKNOWN_VERSION, ReconciledVersion

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from versiontrail.domain.model import ArtifactEntry, VersionEntry


def index_artifacts_by_label(artifacts: Iterable[ArtifactEntry]) -> dict[str, ArtifactEntry]:
    """Map each join label to the first artifact carrying it.

    Later artifacts with an already seen label are ignored; artifacts without a
    usable label are never indexed.
    """

    index: dict[str, ArtifactEntry] = {}
    for artifact in artifacts:
        label = artifact.join_version_label
        if label is UNKNOWN_VERSION:
            continue
        index.setdefault(label, artifact)
    return index


def join_versions(
    history: Sequence[VersionEntry],
    artifacts: Iterable[ArtifactEntry],
) -> tuple[ReconciledVersion, ...]:
    """Pair every history entry, in history order, with its first matching artifact."""

    index = index_artifacts_by_label(artifacts)
    reconciled: list[ReconciledVersion] = []
    for version in history:
        match = index.get(version.label)
        if match is None:
            reconciled.append(ReconciledVersion(label=version.label))
            continue
        reconciled.append(
            ReconciledVersion(
                label=version.label,
                attachment_url=match.url,
                attachment_name=match.name,
            )
        )
    return tuple(reconciled)
