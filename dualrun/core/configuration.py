"""
Key/value runtime configuration handed to example bodies.

A ``RuntimeConfiguration`` is the environment handle of an execution: the
provider fills it for local or cluster mode, the body reads whatever it
needs, and the execution contexts only ask it whether it is remote.
"""

from __future__ import annotations

import re
import threading
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field

from dualrun.datastructures.type_aliases import (
    ConfigurationKey,
    ConfigurationMapping,
    ConfigurationValue,
    RunId,
)

MODE_KEY = "dualrun.mode"
WORKDIR_KEY = "dualrun.workdir"
RUN_ID_KEY = "dualrun.run.id"

LOCAL_MODE = "local"
CLUSTER_MODE = "cluster"

type PairUpdate = Callable[
    [ConfigurationKey, ConfigurationValue],
    tuple[ConfigurationKey, ConfigurationValue] | None,
]


def _identity(value: str) -> str:
    return value


@dataclass(slots=True)
class RuntimeConfiguration:
    """String key/value settings of one execution environment."""

    _values: dict[ConfigurationKey, ConfigurationValue] = field(default_factory=dict)
    _lock: threading.Lock = field(
        default_factory=threading.Lock, repr=False, compare=False
    )

    def get(
        self, key: ConfigurationKey, default: ConfigurationValue | None = None
    ) -> ConfigurationValue | None:
        return self._values.get(key, default)

    def set(self, key: ConfigurationKey, value: ConfigurationValue) -> None:
        self._values[key] = value

    def get_int(self, key: ConfigurationKey, default: int = 0) -> int:
        value = self._values.get(key)
        if value is None:
            return default
        try:
            return int(value.strip())
        except ValueError:
            return default

    def to_dict(self) -> dict[ConfigurationKey, ConfigurationValue]:
        return dict(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[tuple[ConfigurationKey, ConfigurationValue]]:
        return iter(list(self._values.items()))

    def __len__(self) -> int:
        return len(self._values)

    def add_values(
        self,
        key: ConfigurationKey,
        values: Sequence[str],
        separator: str = ",",
    ) -> RuntimeConfiguration:
        """Append ``values`` to the existing value of ``key``."""
        existing = [self._values[key]] if key in self._values else []
        self._values[key] = separator.join([*existing, *values])
        return self

    def override_with(
        self, mapping: ConfigurationMapping
    ) -> RuntimeConfiguration:
        """Set every pair of ``mapping`` on this configuration."""
        for key, value in mapping.items():
            self._values[key] = value
        return self

    def update_with(
        self, other: RuntimeConfiguration, update: PairUpdate
    ) -> RuntimeConfiguration:
        """Copy all pairs of ``other``, remapped by ``update`` where it applies."""
        merged: dict[ConfigurationKey, ConfigurationValue] = {}
        for key, value in other.to_dict().items():
            mapped = update(key, value)
            new_key, new_value = mapped if mapped is not None else (key, value)
            merged[new_key] = new_value
        return self.override_with(merged)

    def update_keys(self, update: PairUpdate) -> RuntimeConfiguration:
        """Set the pairs produced by ``update`` over this configuration's pairs."""
        collected = {}
        for key, value in self.to_dict().items():
            mapped = update(key, value)
            if mapped is not None:
                collected[mapped[0]] = mapped[1]
        return self.override_with(collected)

    def update(
        self,
        key: ConfigurationKey,
        default: ConfigurationValue,
        f: Callable[[str], str] = _identity,
    ) -> RuntimeConfiguration:
        """Set ``key`` to ``f`` of its current value, or of ``default`` if missing."""
        current = self._values.get(key)
        self._values[key] = f(default if current is None else current)
        return self

    def increment(self, key: ConfigurationKey) -> int:
        """Increment an integer property, starting at 1 for a missing key."""
        with self._lock:
            value = self.get_int(key) + 1
            self._values[key] = str(value)
            return value

    def increment_regex(self, key: ConfigurationKey, key_pattern: str) -> int:
        """Store one more than the largest integer found under matching keys."""
        pattern = re.compile(key_pattern)
        with self._lock:
            numbers = []
            for candidate, value in self._values.items():
                if not pattern.search(candidate):
                    continue
                try:
                    numbers.append(int(value))
                except ValueError:
                    continue
            value = max(numbers, default=0) + 1
            self._values[key] = str(value)
            return value

    @property
    def working_directory(self) -> ConfigurationValue | None:
        return self._values.get(WORKDIR_KEY)

    @property
    def run_id(self) -> RunId:
        return self.get_int(RUN_ID_KEY, -1)

    @property
    def is_remote(self) -> bool:
        return self._values.get(MODE_KEY) == CLUSTER_MODE

    def show(self) -> str:
        """All key/values, one ``key=value`` per line."""
        return "\n".join(f"{key}={value}" for key, value in sorted(self._values.items()))


def configuration(
    *pairs: tuple[ConfigurationKey, ConfigurationValue],
) -> RuntimeConfiguration:
    """Build a configuration holding only ``pairs``."""
    conf = RuntimeConfiguration()
    for key, value in pairs:
        conf.set(key, value)
    return conf
