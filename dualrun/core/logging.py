"""Central logging configuration helpers for dualrun."""

from __future__ import annotations

import sys
from collections.abc import Iterable

from loguru import logger

from dualrun.datastructures.level import Level

PACKAGE = "dualrun"

DEFAULT_LOG_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | "
    "{name}:{function}:{line} - {message}"
)


def scope_matches(record_name: str, scopes: Iterable[str]) -> bool:
    """Whether a record logged from module ``record_name`` is in one of ``scopes``.

    A scope is a module prefix, either absolute (``dualrun.core.context``) or
    relative to the package (``core.context``).
    """
    return any(
        record_name.startswith(scope) or record_name.startswith(f"{PACKAGE}.{scope}")
        for scope in scopes
    )


def configure_logging(
    level: Level | str,
    *,
    debug_scopes: Iterable[str] = (),
    colorize: bool = False,
) -> tuple[int, ...]:
    """Configure loguru from a verbosity level.

    ``debug_scopes`` adds a second handler passing the DEBUG records of those
    modules when ``level`` would drop them. ``Level.OFF`` removes every handler
    and installs none.
    """
    logger.remove()

    if isinstance(level, Level):
        loguru_level = level.loguru_level
        if loguru_level is None:
            return ()
    else:
        loguru_level = level.upper()

    handler_ids: list[int] = [
        logger.add(
            sys.stderr,
            level=loguru_level,
            format=DEFAULT_LOG_FORMAT,
            colorize=colorize,
        )
    ]

    scopes = tuple(scope.strip() for scope in debug_scopes if scope.strip())
    if scopes and loguru_level not in ("DEBUG", "TRACE"):
        handler_ids.append(
            logger.add(
                sys.stderr,
                level="DEBUG",
                format=DEFAULT_LOG_FORMAT,
                colorize=colorize,
                filter=lambda record: record["level"].name == "DEBUG"
                and scope_matches(record["name"] or "", scopes),
            )
        )

    return tuple(handler_ids)
