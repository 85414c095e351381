"""Stub collaborators shared by the dualrun tests."""

from __future__ import annotations

from dataclasses import dataclass, field

from dualrun.core.configuration import (
    CLUSTER_MODE,
    LOCAL_MODE,
    MODE_KEY,
    RuntimeConfiguration,
    configuration,
)
from dualrun.datastructures.outcome import Outcome, Success


@dataclass(slots=True)
class StubProvider:
    """Environment provider recording every acquisition."""

    fail_local: Exception | None = None
    fail_remote: Exception | None = None
    acquired: list[str] = field(default_factory=list)

    def local_environment(self) -> RuntimeConfiguration:
        self.acquired.append(LOCAL_MODE)
        if self.fail_local is not None:
            raise self.fail_local
        return configuration((MODE_KEY, LOCAL_MODE))

    def remote_environment(self) -> RuntimeConfiguration:
        self.acquired.append(CLUSTER_MODE)
        if self.fail_remote is not None:
            raise self.fail_remote
        return configuration((MODE_KEY, CLUSTER_MODE))


@dataclass(slots=True)
class RecordingBody:
    """Example body returning a fixed outcome per mode and recording calls.

    ``calls`` holds ``(sequence number, mode)`` pairs, the sequence number
    coming from a counter shared by every invocation.
    """

    local_result: Outcome | bool | None = field(default_factory=Success)
    remote_result: Outcome | bool | None = field(default_factory=Success)
    calls: list[tuple[int, str]] = field(default_factory=list)

    def __call__(self, conf: RuntimeConfiguration) -> Outcome | bool | None:
        mode = CLUSTER_MODE if conf.is_remote else LOCAL_MODE
        self.calls.append((len(self.calls), mode))
        return self.remote_result if conf.is_remote else self.local_result

    @property
    def modes(self) -> list[str]:
        return [mode for _, mode in self.calls]

    def count(self, mode: str) -> int:
        return self.modes.count(mode)
