"""Fold a local outcome and a subsequent cluster outcome into one verdict."""

from __future__ import annotations

from collections.abc import Callable
from typing import assert_never

from loguru import logger

from dualrun.datastructures.outcome import (
    Error,
    Failure,
    Outcome,
    Skipped,
    Success,
    conjoin,
    map_expected,
)


def change_separator(outcome: Outcome) -> Outcome:
    """Put each conjoined reporting text on its own line."""
    return map_expected(outcome, lambda text: text.replace("; ", "\n"))


def merge_outcomes(local: Outcome, remote: Callable[[], Outcome]) -> Outcome:
    """Combine a local outcome with the outcome of a deferred remote run.

    - a local Failure or Error is returned as is and ``remote`` is never
      called: the failure is expected to reproduce on the cluster;
    - a local Skipped runs ``remote`` and puts the local explanation in front
      of the remote reporting text;
    - a local Success runs ``remote`` and passes only if both passed.
    """
    match local:
        case Failure() | Error():
            logger.debug("Local execution did not pass, cluster execution skipped")
            return local
        case Skipped(expected=local_expected):
            return map_expected(remote(), lambda text: f"{local_expected}\n{text}")
        case Success():
            return change_separator(conjoin(local, remote()))
        case _:
            assert_never(local)
