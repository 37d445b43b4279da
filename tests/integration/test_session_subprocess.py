"""Integration tests for watch session using real subprocesses."""

import sys
from pathlib import Path

from run_notifier.models.config import NotifierConfig
from run_notifier.session import WatchSession

WRITE_REPORT = """
import pathlib, sys
report = sys.argv[-1].split("=", 1)[1]
pathlib.Path("cwd.txt").write_text("ok")
pathlib.Path(report).write_text(
    '<testsuite>'
    '<testcase classname="tests.test_a" name="test_one"/>'
    '<testcase classname="tests.test_b" name="test_two"><failure/></testcase>'
    '</testsuite>'
)
sys.exit(1)
"""


async def test_runs_command_with_report_path(tmp_path: Path) -> None:
    """Runs the command in the root and reads the report it wrote."""
    config = NotifierConfig(
        test_command=[sys.executable, "-c", WRITE_REPORT], root=tmp_path
    )
    session = WatchSession(config=config)

    result = await session.run_once()

    assert (tmp_path / "cwd.txt").read_text() == "ok"
    assert result.num_passed_tests == 1
    assert result.num_failed_tests == 1
    assert result.num_total_test_suites == 2
    assert result.success is False


async def test_command_without_report(tmp_path: Path) -> None:
    """Treats a command that writes no report as an errored run."""
    config = NotifierConfig(
        test_command=[sys.executable, "-c", "raise SystemExit(2)"], root=tmp_path
    )

    exit_code = await WatchSession(config=config).run()

    assert exit_code == 1


async def test_missing_executable(tmp_path: Path) -> None:
    """Reports an errored run when the test command cannot be started."""
    config = NotifierConfig(test_command=["no-such-test-runner"], root=tmp_path)
    session = WatchSession(config=config)

    result = await session.run_once()

    assert result.num_runtime_error_test_suites == 1
    assert await session.run() == 1
