"""Extract a verbosity level from a ``<namespace>.verbose.<level>`` token."""

from __future__ import annotations

from loguru import logger

from dualrun.datastructures.level import DEFAULT_LEVEL, Level
from dualrun.datastructures.type_aliases import CommandLineToken, NamespaceMarker

DEFAULT_NAMESPACE: NamespaceMarker = "scoobi"
VERBOSE_MARKER = "verbose"


def verbose_details(
    token: CommandLineToken, namespace: NamespaceMarker = DEFAULT_NAMESPACE
) -> list[str]:
    """Segments of a token once the namespace and verbose markers are removed."""
    return [
        segment
        for segment in token.split(".")
        if segment not in (namespace, VERBOSE_MARKER)
    ]


def parse_level_name(segment: str) -> Level | None:
    """Parse one segment as a level name or numeric level value."""
    name = segment.strip().upper()
    if not name:
        return None
    if name in Level.__members__:
        return Level[name]
    try:
        return Level.from_numeric_value(int(name))
    except ValueError:
        return None


def parse_level(
    token: CommandLineToken, namespace: NamespaceMarker = DEFAULT_NAMESPACE
) -> Level:
    """Return the first segment of ``token`` naming a level, INFO otherwise.

    ``scoobi.verbose.fine`` gives FINE, ``scoobi.verbose`` and the empty token
    give INFO. Segments that are not levels (``times``, typos) are skipped.
    """
    for segment in verbose_details(token, namespace):
        level = parse_level_name(segment)
        if level is not None:
            return level
        logger.trace("Ignoring non-level segment {!r} in {!r}", segment, token)
    return DEFAULT_LEVEL
