"""
Execution contexts deciding where an example body runs.

Three contexts are available:

- ``LocalContext``: run the body against a local environment;
- ``ClusterContext``: run the body against the cluster environment;
- ``LocalThenClusterContext``: run locally, then on the cluster unless the
  local run already failed, and merge both outcomes.

A body is a plain function taking the environment handle
(``RuntimeConfiguration``) and returning an ``Outcome``. ``True`` and ``None``
are read as Success and ``False`` as Failure. Raised assertions become
Failure and any other exception becomes Error. ``pytest.skip`` is read as
Skipped and ``pytest.fail``/``pytest.xfail`` as Failure. Only interpreter
exits (``KeyboardInterrupt``, ``SystemExit``) escape ``run``.
"""

from __future__ import annotations

import sys
import traceback
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import ClassVar

from loguru import logger

from dualrun.datastructures.outcome import (
    OUTCOME_TYPES,
    Error,
    Failure,
    Outcome,
    Skipped,
    Success,
    annotate,
)

from .arguments import CommandLineArguments
from .configuration import RuntimeConfiguration
from .environment import ConfigurationProvider, EnvironmentProvider
from .merger import merge_outcomes
from .run_gate import ContextKind, check
from .timer import Timer

type BodyResult = Outcome | bool | None
type Body = Callable[[RuntimeConfiguration], BodyResult]


def outcome_of(value: BodyResult) -> Outcome:
    """Convert what a body returned into an outcome."""
    if isinstance(value, OUTCOME_TYPES):
        return value
    if value is None or value is True:
        return Success()
    if value is False:
        return Failure(message="example returned False")
    return Error(
        message=f"TypeError: example returned {type(value).__name__}, expected an outcome",
        cause=TypeError(type(value).__name__),
    )


def execute(body: Body, acquire: Callable[[], RuntimeConfiguration]) -> Outcome:
    """Obtain an environment, run ``body`` with it and capture the outcome."""
    try:
        environment = acquire()
    except Exception as exc:
        logger.error("Could not obtain an execution environment: {}", exc)
        return Error.from_exception(exc)

    try:
        value = body(environment)
    except AssertionError as exc:
        return Failure.from_assertion(exc)
    except Exception as exc:
        logger.opt(exception=exc).warning("Example raised {}", type(exc).__name__)
        return Error.from_exception(exc)
    except BaseException as exc:
        outcome = pytest_outcome(exc)
        if outcome is None:
            raise
        return outcome

    return outcome_of(value)


def pytest_outcome(exc: BaseException) -> Outcome | None:
    """Outcome for a ``pytest.skip``/``pytest.fail``/``pytest.xfail`` raised by a body.

    pytest is only consulted when it is already imported, since a body cannot
    raise its outcome exceptions otherwise.
    """
    outcomes = sys.modules.get("_pytest.outcomes")
    if outcomes is None:
        return None
    if isinstance(exc, outcomes.Skipped):
        return Skipped(reason="skipped", expected=str(exc))
    if isinstance(exc, outcomes.Failed):
        return Failure(
            message=str(exc) or "failed",
            stack_trace=tuple(traceback.format_tb(exc.__traceback__)),
        )
    return None


class ExecutionContext(ABC):
    """Policy for where, and how many times, an example body runs."""

    __slots__ = ()

    @property
    @abstractmethod
    def is_remote(self) -> bool:
        """Whether a run may reach the cluster (libraries must be uploaded)."""

    @abstractmethod
    def run(self, body: Body) -> Outcome: ...

    def __call__(self, body: Body) -> Outcome:
        return self.run(body)


@dataclass(slots=True)
class _GatedContext(ExecutionContext):
    provider: EnvironmentProvider = field(default_factory=ConfigurationProvider)
    arguments: CommandLineArguments = field(default_factory=CommandLineArguments)

    kind: ClassVar[ContextKind]
    time_prefix: ClassVar[str]

    @abstractmethod
    def environment(self) -> RuntimeConfiguration: ...

    def run(self, body: Body) -> Outcome:
        skipped = check(self.kind, self.arguments.filters)
        if skipped is not None:
            return skipped

        with Timer(self.time_prefix) as timer:
            outcome = execute(body, self.environment)

        if self.arguments.show_times:
            return annotate(outcome, self.time_prefix, timer.time)
        return outcome


@dataclass(slots=True)
class LocalContext(_GatedContext):
    """Run the body in-process against a local environment."""

    kind: ClassVar[ContextKind] = ContextKind.LOCAL
    time_prefix: ClassVar[str] = "Local execution time"

    @property
    def is_remote(self) -> bool:
        return False

    def environment(self) -> RuntimeConfiguration:
        return self.provider.local_environment()


@dataclass(slots=True)
class ClusterContext(_GatedContext):
    """Run the body against the cluster environment."""

    kind: ClassVar[ContextKind] = ContextKind.REMOTE
    time_prefix: ClassVar[str] = "Cluster execution time"

    @property
    def is_remote(self) -> bool:
        return True

    def environment(self) -> RuntimeConfiguration:
        return self.provider.remote_environment()


@dataclass(slots=True)
class LocalThenClusterContext(ExecutionContext):
    """Run locally first, then on the cluster unless the local run failed."""

    provider: EnvironmentProvider = field(default_factory=ConfigurationProvider)
    arguments: CommandLineArguments = field(default_factory=CommandLineArguments)

    @property
    def local(self) -> LocalContext:
        return LocalContext(provider=self.provider, arguments=self.arguments)

    @property
    def cluster(self) -> ClusterContext:
        return ClusterContext(provider=self.provider, arguments=self.arguments)

    @property
    def is_remote(self) -> bool:
        return True

    def run(self, body: Body) -> Outcome:
        local_outcome = self.local.run(body)
        cluster = self.cluster
        return merge_outcomes(local_outcome, lambda: cluster.run(body))


CONTEXTS: dict[str, type[ExecutionContext]] = {
    "local": LocalContext,
    "cluster": ClusterContext,
    "local-then-cluster": LocalThenClusterContext,
}


def create_context(
    name: str,
    provider: EnvironmentProvider | None = None,
    arguments: CommandLineArguments | None = None,
) -> ExecutionContext:
    """Build the context registered under ``name``."""
    try:
        context_type = CONTEXTS[name]
    except KeyError:
        raise ValueError(
            f"Unknown context {name!r}, expected one of {sorted(CONTEXTS)}"
        ) from None
    if provider is None:
        provider = ConfigurationProvider()
    if arguments is None:
        arguments = CommandLineArguments()
    return context_type(provider=provider, arguments=arguments)  # type: ignore[call-arg]
