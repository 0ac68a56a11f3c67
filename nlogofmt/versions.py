"""
Version strings and version-conditioned source conversion.

Version sections hold free-form text such as "NetLogo 6.0.4",
"NetLogo 4.1RC3" or "NetLogo 3D 5.0beta2". Only the numeric release and an
optional pre-release tag take part in comparisons.
"""

from __future__ import annotations

import logging
import re
from typing import Callable

from nlogofmt.spec import CURRENT_VERSION, INFO_MARKDOWN_VERSION

logger = logging.getLogger(__name__)

# version -> (source -> source)
AutoConvert = Callable[[str], Callable[[str], str]]

_VERSION_PATTERN = re.compile(
    r"(\d+)\.(\d+)(?:\.(\d+))?\s*(?:(pre|beta|RC)\s*(\d+))?",
    re.IGNORECASE,
)

# Pre-release stages sort before the final release
_STAGE_RANK = {"pre": 0, "beta": 1, "rc": 2, None: 3}


def parse_version(version: str) -> tuple[int, int, int, int, int] | None:
    """
    Parse a version string into a comparable tuple.

    Returns (major, minor, patch, stage, stage_number), or None when the
    string contains no release number.
    """
    match = _VERSION_PATTERN.search(version)
    if match is None:
        return None
    major, minor, patch, stage, stage_number = match.groups()
    return (
        int(major),
        int(minor),
        int(patch or 0),
        _STAGE_RANK[stage.lower() if stage else None],
        int(stage_number or 0),
    )


def _threshold(threshold: str) -> tuple[int, int, int, int, int]:
    parsed = parse_version(threshold)
    if parsed is None:
        raise ValueError(f"Invalid version threshold: {threshold!r}")
    return parsed


def _predates(version: str, threshold: tuple[int, int, int, int, int]) -> bool:
    parsed = parse_version(version)
    if parsed is None:
        logger.warning(f"Unrecognized version string: {version!r}")
        return False
    return parsed < threshold


def older_than(version: str, threshold: str) -> bool:
    """
    True if version predates threshold. Unparseable versions are never older.

    Raises ValueError if threshold itself is not a version.
    """
    return _predates(version, _threshold(threshold))


def older_than_42pre2(version: str) -> bool:
    return older_than(version, INFO_MARKDOWN_VERSION)


def identity_auto_convert(version: str) -> Callable[[str], str]:
    """Leaves source untouched regardless of version."""
    return lambda source: source


def threshold_auto_convert(
    rewrite: Callable[[str, str], str],
    threshold: str = CURRENT_VERSION,
) -> AutoConvert:
    """
    Build an auto-convert hook from a rewrite function.

    rewrite(source, version) is applied only to documents saved by a version
    older than threshold; newer documents pass through unchanged.
    Raises ValueError if threshold is not a version.
    """
    parsed_threshold = _threshold(threshold)

    def convert(version: str) -> Callable[[str], str]:
        if not _predates(version, parsed_threshold):
            return lambda source: source
        return lambda source: rewrite(source, version)

    return convert
