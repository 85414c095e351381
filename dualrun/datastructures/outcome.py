"""
Outcome variants produced by running an example body.

An outcome is one of four immutable dataclasses: Success, Failure, Error or
Skipped. They form a closed union (``Outcome``) and every operation over them
dispatches with an exhaustive ``match`` instead of relying on subclass
overrides, so adding a variant forces every operation to be revisited.

All variants carry an ``expected`` text: the free-form reporting annotation
(execution times, skip explanations, combined results) shown next to the
verdict.
"""

from __future__ import annotations

import traceback
from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import assert_never

from hypothesis import strategies as st

from .type_aliases import (
    ExpectedText,
    OutcomeMessage,
    SkipReason,
    StackFrameText,
)


@dataclass(frozen=True, slots=True)
class Success:
    """The body ran and every expectation held."""

    message: OutcomeMessage = ""
    expected: ExpectedText = ""


@dataclass(frozen=True, slots=True)
class Failure:
    """An expectation of the body did not hold."""

    message: OutcomeMessage
    expected: ExpectedText = ""
    actual: str = ""
    stack_trace: tuple[StackFrameText, ...] = ()

    @classmethod
    def from_assertion(cls, exc: AssertionError) -> Failure:
        """Build a failure from an assertion raised by the body."""
        message = str(exc) or "assertion failed"
        return cls(
            message=message,
            stack_trace=tuple(traceback.format_tb(exc.__traceback__)),
        )


@dataclass(frozen=True, slots=True)
class Error:
    """The body, or the acquisition of its environment, raised unexpectedly."""

    message: OutcomeMessage
    cause: BaseException | None = None
    expected: ExpectedText = ""

    @classmethod
    def from_exception(cls, exc: BaseException) -> Error:
        name = type(exc).__name__
        message = f"{name}: {exc}" if str(exc) else name
        return cls(message=message, cause=exc)


@dataclass(frozen=True, slots=True)
class Skipped:
    """The body was deliberately not executed."""

    reason: SkipReason
    expected: ExpectedText = ""


type Outcome = Success | Failure | Error | Skipped

OUTCOME_TYPES = (Success, Failure, Error, Skipped)


def is_passing(outcome: Outcome) -> bool:
    """Success and Skipped pass; Failure and Error do not."""
    match outcome:
        case Success() | Skipped():
            return True
        case Failure() | Error():
            return False
        case _:
            assert_never(outcome)


def join_text(first: str, second: str, separator: str) -> str:
    """Join two reporting texts, dropping the separator around empty sides."""
    if not first:
        return second
    if not second:
        return first
    return f"{first}{separator}{second}"


def map_expected(outcome: Outcome, f: Callable[[str], str]) -> Outcome:
    """Return a copy of any outcome with its ``expected`` text transformed."""
    match outcome:
        case Success() | Failure() | Error() | Skipped():
            return replace(outcome, expected=f(outcome.expected))
        case _:
            assert_never(outcome)


def map_skipped_reason(outcome: Outcome, f: Callable[[str], str]) -> Outcome:
    """Transform the ``expected`` text of a Skipped outcome, identity otherwise."""
    match outcome:
        case Skipped():
            return replace(outcome, expected=f(outcome.expected))
        case Success() | Failure() | Error():
            return outcome
        case _:
            assert_never(outcome)


def annotate(outcome: Outcome, prefix: str, extra: str) -> Outcome:
    """Append the line ``"<prefix>: <extra>"`` to the reporting text.

    The verdict is untouched; annotating twice is the same as annotating once
    with both lines.
    """
    line = f"{prefix}: {extra}"
    return map_expected(outcome, lambda text: join_text(text, line, "\n"))


def conjoin(left: Outcome, right: Outcome) -> Outcome:
    """Combine two outcomes so that the result passes only if both pass.

    A failing ``left`` wins outright. A failing ``right`` is returned with the
    reporting text of ``left`` in front of its own. Two passing outcomes
    become a Success (or a Skipped when neither side actually ran) with their
    messages joined by ``" and "`` and their texts joined by ``"; "``.
    """
    if not is_passing(left):
        return left

    match right:
        case Failure() | Error():
            return map_expected(
                right, lambda text: join_text(left.expected, text, "; ")
            )
        case Skipped() if isinstance(left, Skipped):
            return Skipped(
                reason=left.reason,
                expected=join_text(left.expected, right.expected, "; "),
            )
        case Success() | Skipped():
            return Success(
                message=join_text(_message(left), _message(right), " and "),
                expected=join_text(left.expected, right.expected, "; "),
            )
        case _:
            assert_never(right)


def _message(outcome: Outcome) -> str:
    match outcome:
        case Success() | Failure() | Error():
            return outcome.message
        case Skipped():
            return ""
        case _:
            assert_never(outcome)


# Hypothesis strategies

_reporting_text = st.text(max_size=40)


def success_strategy() -> st.SearchStrategy[Success]:
    return st.builds(Success, message=_reporting_text, expected=_reporting_text)


def failure_strategy() -> st.SearchStrategy[Failure]:
    return st.builds(
        Failure,
        message=_reporting_text.filter(bool),
        expected=_reporting_text,
        actual=_reporting_text,
        stack_trace=st.tuples(),
    )


def error_strategy() -> st.SearchStrategy[Error]:
    return st.builds(
        Error,
        message=_reporting_text.filter(bool),
        cause=st.none(),
        expected=_reporting_text,
    )


def skipped_strategy() -> st.SearchStrategy[Skipped]:
    return st.builds(Skipped, reason=_reporting_text, expected=_reporting_text)


def failing_outcome_strategy() -> st.SearchStrategy[Outcome]:
    return st.one_of(failure_strategy(), error_strategy())


def outcome_strategy() -> st.SearchStrategy[Outcome]:
    """Generate any outcome variant."""
    return st.one_of(
        success_strategy(),
        failure_strategy(),
        error_strategy(),
        skipped_strategy(),
    )
