"""Decide whether a completed run deserves a notification and what it says."""

import sys
from pathlib import Path
from typing import Literal

from run_notifier.models.config import NotifyMode
from run_notifier.models.notification import NotificationPayload
from run_notifier.models.result import AggregatedResult
from run_notifier.models.state import RunState

Decision = Literal["success", "failure"] | None

RESTART_ANSWER = "Run again"
QUIT_ANSWER = "Exit tests"
CLOSE_LABEL = "Close"

SUCCESS_GLYPH = "✅ "
FAILURE_GLYPH = "⛔️ "


def decide(state: RunState, result: AggregatedResult, mode: NotifyMode) -> Decision:
    """Pick the notification for a run, given the session history.

    ``change`` notifies on the first run and whenever the status flips.
    ``success-change`` notifies every passing run plus failing runs that
    follow a success; ``failure-change`` mirrors it. The flip term of each
    ``*-change`` mode therefore gates the opposite status. Gating it on the
    mode's own status would make ``success-change`` behave exactly like
    ``success`` and ``failure-change`` exactly like ``failure``.

    Args:
        state: Outcome history of the session (not modified)
        result: Aggregated result of the run that just completed
        mode: Configured notification mode

    Returns:
        "success" or "failure" for the notification to send, None for no
        notification

    """
    success = result.success
    status_changed = state.previous_success != success or state.first_run

    success_trigger = mode in ("always", "success", "success-change") or (
        mode in ("change", "failure-change") and status_changed
    )
    failure_trigger = mode in ("always", "failure", "failure-change") or (
        mode in ("change", "success-change") and status_changed
    )

    if success and success_trigger:
        return "success"
    if not success and failure_trigger:
        return "failure"
    return None


def update_state(state: RunState, result: AggregatedResult, decision: Decision) -> None:
    """Record the run in the session history when a notification was taken."""
    if decision is None:
        return
    state.previous_success = result.success
    state.first_run = False


def failure_percentage(result: AggregatedResult) -> int:
    """Share of failed tests, rounded up; 0 when the run had no tests."""
    if result.num_total_tests == 0:
        return 0
    return -(-100 * result.num_failed_tests // result.num_total_tests)


def build_payload(
    decision: Literal["success", "failure"],
    result: AggregatedResult,
    icon: Path | None = None,
    platform: str = sys.platform,
) -> NotificationPayload:
    """Build the notification content for a decision."""
    emoji = platform == "darwin"

    if decision == "success":
        prefix = SUCCESS_GLYPH if emoji else ""
        return NotificationPayload(
            icon=icon,
            title="100% Passed",
            message=f"{prefix}{result.num_passed_tests} tests passed",
        )

    prefix = FAILURE_GLYPH if emoji else ""
    return NotificationPayload(
        icon=icon,
        title=f"{failure_percentage(result)}% Failed",
        message=(
            f"{prefix}{result.num_failed_tests} of "
            f"{result.num_total_tests} tests failed"
        ),
        actions=(RESTART_ANSWER, QUIT_ANSWER),
        close_label=CLOSE_LABEL,
    )
