from typing import Literal, assert_never

from pydantic import BaseModel, Field

from dualrun.datastructures.outcome import (
    Error,
    Failure,
    Outcome,
    Skipped,
    Success,
    is_passing,
)


class OutcomeReport(BaseModel):
    """
    Serializable view of an outcome, used for machine readable output.
    """

    kind: Literal["success", "failure", "error", "skipped"] = Field(
        description="The outcome variant."
    )
    passing: bool = Field(description="Whether the outcome counts as a pass.")
    message: str = Field(default="", description="Human readable message.")
    expected: str = Field(
        default="", description="Reporting annotations (times, skip notes)."
    )
    reason: str | None = Field(
        default=None, description="Machine readable skip reason."
    )
    actual: str | None = Field(
        default=None, description="Actual value of a failed expectation."
    )
    stack_trace: tuple[str, ...] = Field(
        default_factory=tuple, description="Formatted frames of a failure."
    )

    @classmethod
    def from_outcome(cls, outcome: Outcome) -> "OutcomeReport":
        passing = is_passing(outcome)
        match outcome:
            case Success(message=message, expected=expected):
                return cls(
                    kind="success", passing=passing, message=message, expected=expected
                )
            case Failure():
                return cls(
                    kind="failure",
                    passing=passing,
                    message=outcome.message,
                    expected=outcome.expected,
                    actual=outcome.actual,
                    stack_trace=outcome.stack_trace,
                )
            case Error(message=message, expected=expected):
                return cls(
                    kind="error", passing=passing, message=message, expected=expected
                )
            case Skipped(reason=reason, expected=expected):
                return cls(
                    kind="skipped", passing=passing, reason=reason, expected=expected
                )
            case _:
                assert_never(outcome)


class DualRunException(Exception):
    """Base class for errors raised by dualrun collaborators."""


class ClusterNotConfiguredError(DualRunException):
    """No cluster filesystem is known, so a remote environment cannot be built."""

    def __init__(self, missing: str) -> None:
        super().__init__(f"Cluster is not configured: {missing} is not set")
        self.missing = missing


class InvalidTargetError(DualRunException):
    """An example target could not be imported as ``module:function``."""

    def __init__(self, target: str, details: str) -> None:
        super().__init__(f"Invalid example target {target!r}: {details}")
        self.target = target
        self.details = details
