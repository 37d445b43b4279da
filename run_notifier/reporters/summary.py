"""Reporter logging a summary of each completed run."""

import logging
from collections.abc import Set as AbstractSet
from dataclasses import dataclass, field

from run_notifier.models.result import AggregatedResult, RunContext

STATUS_SYMBOLS = {
    "passed": "✅",
    "failed": "❌",
    "error": "❗",
}


@dataclass(kw_only=True)
class SummaryReporter:
    """Log pass/fail counts of every run."""

    log: logging.Logger = field(default_factory=lambda: logging.getLogger(__name__))

    def on_run_complete(
        self, contexts: AbstractSet[RunContext], result: AggregatedResult
    ) -> None:
        """Log a formatted summary of the run."""
        if result.num_runtime_error_test_suites:
            status = "error"
        elif result.num_failed_tests:
            status = "failed"
        else:
            status = "passed"

        self.log.info("=" * 80)
        self.log.info("Test Run Summary:")
        self.log.info("=" * 80)
        for context in sorted(contexts, key=lambda c: c.root):
            self.log.info("  Root: %s", context.root)
            self.log.info("  Command: %s", " ".join(context.command))
        self.log.info(
            "%s Tests: %d passed, %d failed, %d skipped, %d total",
            STATUS_SYMBOLS[status],
            result.num_passed_tests,
            result.num_failed_tests,
            result.num_pending_tests,
            result.num_total_tests,
        )
        self.log.info(
            "  Suites: %d passed, %d failed, %d errored, %d total",
            result.num_passed_test_suites,
            result.num_failed_test_suites,
            result.num_runtime_error_test_suites,
            result.num_total_test_suites,
        )
