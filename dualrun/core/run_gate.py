"""Filter based permission check for local and cluster execution."""

from __future__ import annotations

from enum import Enum
from typing import assert_never

from loguru import logger

from dualrun.datastructures.outcome import Skipped

from .arguments import FilterSet

EXCLUDED_REASON = "excluded"

# Enables both local and cluster execution.
HADOOP_TAG = "hadoop"
LOCAL_TAG = "local"
CLUSTER_TAG = "cluster"


class ContextKind(Enum):
    """Where a body is executed."""

    LOCAL = "local"
    """In-process execution against a local environment."""

    REMOTE = "cluster"
    """Execution against the cluster environment."""


def allowed(kind: ContextKind, filters: FilterSet) -> bool:
    """Return whether ``kind`` may run given the enabled filters.

    Both kinds are opt-in: ``hadoop`` enables both, ``local`` and ``cluster``
    enable one each, and no tag at all skips both.
    """
    match kind:
        case ContextKind.REMOTE:
            return filters.keep(HADOOP_TAG) or filters.keep(CLUSTER_TAG)
        case ContextKind.LOCAL:
            return filters.keep(HADOOP_TAG) or filters.keep(LOCAL_TAG)
        case _:
            assert_never(kind)


def excluded(kind: ContextKind) -> Skipped:
    """The outcome of a context denied by the gate."""
    return Skipped(
        reason=EXCLUDED_REASON, expected=f"No {kind.value} execution time"
    )


def check(kind: ContextKind, filters: FilterSet) -> Skipped | None:
    """Return the Skipped outcome when ``kind`` is denied, None when allowed."""
    if allowed(kind, filters):
        return None
    logger.debug(
        "{} execution excluded by filters {}", kind.value, sorted(filters.tags)
    )
    return excluded(kind)
