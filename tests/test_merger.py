"""Tests for folding a local outcome with a deferred cluster outcome."""

import pytest
from hypothesis import given

from dualrun.core.merger import change_separator, merge_outcomes
from dualrun.datastructures.outcome import (
    Error,
    Failure,
    Outcome,
    Skipped,
    Success,
    failing_outcome_strategy,
    outcome_strategy,
)


def never_called() -> Outcome:
    pytest.fail("the cluster outcome must not be evaluated")


class TestLocalFailure:
    def test_failure_is_returned_unchanged(self):
        local = Failure("boom", expected="x", actual="y")
        assert merge_outcomes(local, never_called) is local

    def test_error_is_returned_unchanged(self):
        local = Error("boom", cause=ValueError("boom"))
        assert merge_outcomes(local, never_called) is local

    @given(failing_outcome_strategy())
    def test_remote_never_evaluated(self, local: Outcome):
        calls: list[int] = []

        def remote() -> Outcome:
            calls.append(1)
            return Success()

        assert merge_outcomes(local, remote) is local
        assert calls == []


class TestLocalSkipped:
    def test_remote_outcome_prefixed_with_local_explanation(self):
        local = Skipped("excluded", "No local execution time")
        remote = Success(expected="Cluster execution time: 2 ms")

        merged = merge_outcomes(local, lambda: remote)
        assert merged == Success(
            expected="No local execution time\nCluster execution time: 2 ms"
        )

    def test_both_skipped(self):
        local = Skipped("excluded", "No local execution time")
        remote = Skipped("excluded", "No cluster execution time")

        merged = merge_outcomes(local, lambda: remote)
        assert merged == Skipped(
            "excluded", "No local execution time\nNo cluster execution time"
        )

    @given(outcome_strategy())
    def test_remote_verdict_kept(self, remote: Outcome):
        merged = merge_outcomes(Skipped("excluded", "local note"), lambda: remote)
        assert type(merged) is type(remote)
        assert merged.expected == f"local note\n{remote.expected}"


class TestLocalSuccess:
    def test_both_succeed(self):
        merged = merge_outcomes(
            Success(expected="Local execution time: 1 ms"),
            lambda: Success(expected="Cluster execution time: 3 ms"),
        )
        assert merged == Success(
            expected="Local execution time: 1 ms\nCluster execution time: 3 ms"
        )

    def test_remote_failure_wins(self):
        merged = merge_outcomes(
            Success(expected="Local execution time: 1 ms"),
            lambda: Failure("differs on the cluster"),
        )
        assert merged == Failure(
            "differs on the cluster", expected="Local execution time: 1 ms"
        )

    def test_remote_skipped_keeps_success(self):
        merged = merge_outcomes(
            Success("ok"), lambda: Skipped("excluded", "No cluster execution time")
        )
        assert merged == Success("ok", "No cluster execution time")


def test_change_separator() -> None:
    assert change_separator(Success(expected="a; b; c")) == Success(
        expected="a\nb\nc"
    )
