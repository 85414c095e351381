"""Pytest configuration and fixtures for dualrun testing.

Provides stub environment providers and argument builders so that contexts
can be exercised without a cluster.
"""

from collections.abc import Callable, Iterator

import pytest
from loguru import logger
from tests_support import StubProvider

from dualrun.core.arguments import CommandLineArguments


@pytest.fixture
def stub_provider() -> StubProvider:
    return StubProvider()


@pytest.fixture
def arguments_for() -> Callable[..., CommandLineArguments]:
    """Build command-line arguments including the given tags."""

    def _build(*tags: str, times: bool = False) -> CommandLineArguments:
        tokens: list[str] = []
        if tags:
            tokens.extend(["include", ",".join(tags)])
        if times:
            tokens.append("scoobi.times")
        return CommandLineArguments.from_tokens(tokens)

    return _build


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Capture loguru messages emitted during the test."""
    messages: list[str] = []
    handler_id = logger.add(
        lambda message: messages.append(message.record["message"]), level="TRACE"
    )
    yield messages
    logger.remove(handler_id)
