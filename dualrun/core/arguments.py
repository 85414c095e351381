"""
Command-line derived switches for example execution.

Tokens come either from a process command line (``include hadoop,local
scoobi.verbose.fine.times``) or from the pytest plugin options. Only simple
membership and full-match pattern checks are performed on them.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field

from dualrun.datastructures.level import Level
from dualrun.datastructures.type_aliases import (
    CommandLineToken,
    FilterTag,
    NamespaceMarker,
)

from .level_parser import DEFAULT_NAMESPACE, parse_level

INCLUDE_KEYWORD = "include"
INCLUDE_OPTION = "--include="


@dataclass(frozen=True, slots=True)
class FilterSet:
    """The inclusion tags enabled for this run."""

    tags: frozenset[FilterTag] = frozenset()

    @classmethod
    def of(cls, *tags: FilterTag) -> FilterSet:
        return cls(frozenset(tags))

    @classmethod
    def from_csv(cls, values: Iterable[str]) -> FilterSet:
        """Build a filter set from comma separated tag lists."""
        return cls(
            frozenset(
                tag.strip()
                for value in values
                for tag in value.split(",")
                if tag.strip()
            )
        )

    def keep(self, tag: FilterTag) -> bool:
        return tag in self.tags

    def __contains__(self, tag: object) -> bool:
        return tag in self.tags

    def __iter__(self) -> Iterator[FilterTag]:
        return iter(sorted(self.tags))

    def __len__(self) -> int:
        return len(self.tags)


@dataclass(frozen=True, slots=True)
class CommandLineArguments:
    """Filters, verbosity and time display derived from raw tokens."""

    tokens: tuple[CommandLineToken, ...] = ()
    filters: FilterSet = field(default_factory=FilterSet)
    namespace: NamespaceMarker = DEFAULT_NAMESPACE

    @classmethod
    def from_tokens(
        cls,
        tokens: Sequence[CommandLineToken],
        namespace: NamespaceMarker = DEFAULT_NAMESPACE,
    ) -> CommandLineArguments:
        """Parse ``include <tags>`` pairs and ``--include=<tags>`` options."""
        tokens = tuple(tokens)
        included: list[str] = []
        for index, token in enumerate(tokens):
            if token == INCLUDE_KEYWORD and index + 1 < len(tokens):
                included.append(tokens[index + 1])
            elif token.startswith(INCLUDE_OPTION):
                included.append(token[len(INCLUDE_OPTION) :])
        return cls(
            tokens=tokens,
            filters=FilterSet.from_csv(included),
            namespace=namespace,
        )

    def keep(self, tag: FilterTag) -> bool:
        return self.filters.keep(tag)

    @property
    def show_times(self) -> bool:
        """True when a token such as ``scoobi.times`` asks for execution times."""
        pattern = re.compile(rf"{re.escape(self.namespace)}.*.times.*")
        return any(pattern.fullmatch(token) for token in self.tokens)

    @property
    def verbose_arg(self) -> CommandLineToken | None:
        pattern = re.compile(rf"{re.escape(self.namespace)}.*verbose.*")
        return next(
            (token for token in self.tokens if pattern.fullmatch(token)), None
        )

    @property
    def quiet(self) -> bool:
        return self.verbose_arg is None

    @property
    def level(self) -> Level:
        return parse_level(self.verbose_arg or "", self.namespace)
