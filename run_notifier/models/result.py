"""Models for aggregated test run results."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class AggregatedResult:
    """Rolled-up counts for one completed execution of the test suite."""

    num_passed_tests: int = 0
    num_failed_tests: int = 0
    num_pending_tests: int = 0
    num_total_tests: int = 0
    num_passed_test_suites: int = 0
    num_failed_test_suites: int = 0
    num_runtime_error_test_suites: int = 0
    num_total_test_suites: int = 0

    @property
    def success(self) -> bool:
        """A run succeeds when no test failed and no suite errored at runtime."""
        return self.num_failed_tests == 0 and self.num_runtime_error_test_suites == 0


@dataclass(frozen=True, kw_only=True)
class RunContext:
    """Handle describing where and how a run was executed."""

    root: str
    command: tuple[str, ...]
