"""Tests for summary reporter."""

import logging

import pytest

from run_notifier.models.result import AggregatedResult, RunContext
from run_notifier.reporters.summary import SummaryReporter
from run_notifier.testing.factories import AggregatedResultFactory, FailedResultFactory


def test_logs_passed_run(caplog: pytest.LogCaptureFixture) -> None:
    """Logs a passed run with checkmark symbol."""
    context = RunContext(root="/project", command=("pytest", "-q"))

    with caplog.at_level(logging.INFO):
        SummaryReporter().on_run_complete({context}, AggregatedResultFactory.build())

    assert "Test Run Summary:" in caplog.text
    assert "Root: /project" in caplog.text
    assert "Command: pytest -q" in caplog.text
    assert "✅ Tests: 3 passed, 0 failed, 0 skipped, 3 total" in caplog.text
    assert "Suites: 1 passed, 0 failed, 0 errored, 1 total" in caplog.text


def test_logs_failed_run(caplog: pytest.LogCaptureFixture) -> None:
    """Logs a failed run with X symbol."""
    with caplog.at_level(logging.INFO):
        SummaryReporter().on_run_complete(set(), FailedResultFactory.build())

    assert "❌ Tests: 2 passed, 1 failed, 0 skipped, 3 total" in caplog.text


def test_logs_errored_run(caplog: pytest.LogCaptureFixture) -> None:
    """Logs a run with runtime-error suites with exclamation symbol."""
    result = AggregatedResult(
        num_failed_test_suites=1,
        num_runtime_error_test_suites=1,
        num_total_test_suites=1,
    )

    with caplog.at_level(logging.INFO):
        SummaryReporter().on_run_complete(set(), result)

    assert "❗ Tests: 0 passed, 0 failed, 0 skipped, 0 total" in caplog.text
    assert "Suites: 0 passed, 1 failed, 1 errored, 1 total" in caplog.text


def test_uses_given_logger(caplog: pytest.LogCaptureFixture) -> None:
    """Writes to the logger it was created with."""
    reporter = SummaryReporter(log=logging.getLogger("custom"))

    with caplog.at_level(logging.INFO, logger="custom"):
        reporter.on_run_complete(set(), AggregatedResultFactory.build())

    assert all(record.name == "custom" for record in caplog.records)
    assert caplog.records
