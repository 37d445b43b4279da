"""Aggregate JUnit XML reports into run results."""

import xml.etree.ElementTree as ET
from collections import defaultdict
from collections.abc import Iterable
from pathlib import Path
from typing import Literal

from run_notifier.models.result import AggregatedResult

COLLECTION_FAILURE = "collection failure"

Outcome = Literal["passed", "failed", "pending"]


def parse_report(report_path: Path) -> AggregatedResult:
    """Parse a JUnit XML report written by pytest.

    Raises:
        FileNotFoundError: If the report does not exist
        xml.etree.ElementTree.ParseError: If the report is not valid XML

    """
    root = ET.parse(report_path).getroot()
    return aggregate_testcases(root.iter("testcase"))


def missing_report_result() -> AggregatedResult:
    """Result for a run that crashed before writing a report."""
    return AggregatedResult(
        num_failed_test_suites=1,
        num_runtime_error_test_suites=1,
        num_total_test_suites=1,
    )


def suite_name(classname: str) -> str:
    """Module part of a testcase classname, without test classes."""
    parts = classname.split(".")
    while len(parts) > 1 and parts[-1].startswith("Test"):
        parts.pop()
    return ".".join(parts)


def testcase_outcome(testcase: ET.Element) -> Outcome:
    """Outcome of a single testcase element."""
    if testcase.find("failure") is not None or testcase.find("error") is not None:
        return "failed"
    if testcase.find("skipped") is not None:
        return "pending"
    return "passed"


def is_collection_error(testcase: ET.Element) -> bool:
    """Whether the testcase stands for a module that failed to import."""
    error = testcase.find("error")
    return error is not None and error.get("message") == COLLECTION_FAILURE


def aggregate_testcases(testcases: Iterable[ET.Element]) -> AggregatedResult:
    """Roll testcase elements up into test and suite counts."""
    suites: defaultdict[str, list[Outcome]] = defaultdict(list)
    errored_suites: set[str] = set()

    for testcase in testcases:
        if is_collection_error(testcase):
            errored_suites.add(testcase.get("classname") or testcase.get("name", ""))
            continue
        suite = suite_name(testcase.get("classname", ""))
        suites[suite].append(testcase_outcome(testcase))

    outcomes = [outcome for suite in suites.values() for outcome in suite]
    failed_suites = {name for name, suite in suites.items() if "failed" in suite}
    failed_suites -= errored_suites
    passed_suites = suites.keys() - failed_suites - errored_suites

    return AggregatedResult(
        num_passed_tests=outcomes.count("passed"),
        num_failed_tests=outcomes.count("failed"),
        num_pending_tests=outcomes.count("pending"),
        num_total_tests=len(outcomes),
        num_passed_test_suites=len(passed_suites),
        num_failed_test_suites=len(failed_suites) + len(errored_suites),
        num_runtime_error_test_suites=len(errored_suites),
        num_total_test_suites=len(suites.keys() | errored_suites),
    )
