"""Normalization of loosely typed version values into join labels.

The record store reports version labels as ``"<major>.<minor>"`` strings, while
the custom version column on artifacts may come back as a string, an integer, a
float or not at all. Everything is folded into the label format or into
``UNKNOWN_VERSION``.
"""

from __future__ import annotations

import math
import re
from dataclasses import replace
from logging import getLogger
from typing import TYPE_CHECKING

from versiontrail.domain.model import DISPLAY_LABEL_UNAVAILABLE, UNKNOWN_VERSION, VersionSentinel

if TYPE_CHECKING:
    from collections.abc import Iterable

    from versiontrail.domain.model import ArtifactEntry, JoinLabel

log = getLogger(__name__)

_VERSION_LABEL = re.compile(r"(?P<major>\d+)(?:\.(?P<minor>\d+))?", re.ASCII)


def normalize_join_label(value: object) -> JoinLabel:
    """Return ``value`` as a version label, or ``UNKNOWN_VERSION``.

    ``"2"``, ``2`` and ``2.0`` all become ``"2.0"``; blanks, negatives, booleans and
    anything that does not look like ``major[.minor]`` become ``UNKNOWN_VERSION``.
    """

    if value is None or isinstance(value, VersionSentinel):
        return UNKNOWN_VERSION
    # bool is an int subclass
    if isinstance(value, bool):
        return UNKNOWN_VERSION
    if isinstance(value, int):
        return f"{value}.0" if value >= 0 else UNKNOWN_VERSION
    if isinstance(value, float):
        if not math.isfinite(value) or value < 0:
            return UNKNOWN_VERSION
        return _normalize_text(repr(value))
    if isinstance(value, str):
        return _normalize_text(value)
    return UNKNOWN_VERSION


def normalize_display_label(value: object) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    if isinstance(value, int | float) and not isinstance(value, bool):
        return str(value)
    return DISPLAY_LABEL_UNAVAILABLE


def normalize_artifacts(artifacts: Iterable[ArtifactEntry]) -> list[ArtifactEntry]:
    """Re-apply join label normalization to artifacts from any gateway."""

    normalized: list[ArtifactEntry] = []
    for artifact in artifacts:
        label = normalize_join_label(artifact.join_version_label)
        if label != artifact.join_version_label:
            log.debug(
                "Normalized join label of %s from %r to %r",
                artifact.name,
                artifact.join_version_label,
                label,
            )
            artifact = replace(artifact, join_version_label=label)  # noqa: PLW2901
        normalized.append(artifact)
    return normalized


def _normalize_text(text: str) -> JoinLabel:
    match = _VERSION_LABEL.fullmatch(text.strip())
    if match is None:
        return UNKNOWN_VERSION
    major = int(match["major"])
    minor = int(match["minor"]) if match["minor"] is not None else 0
    return f"{major}.{minor}"
