"""Tests for notify-send backend."""

from pathlib import Path
from unittest.mock import AsyncMock, patch

from run_notifier.models.notification import NotificationMetadata, NotificationPayload
from run_notifier.notifiers.notify_send import NotifySendConfig, NotifySendService


def test_build_command_for_simple_notification() -> None:
    """Puts options before title and message."""
    service = NotifySendService(config=NotifySendConfig())
    payload = NotificationPayload(title="100% Passed", message="3 tests passed")

    assert service.build_command(payload) == [
        "notify-send",
        "--app-name=run-notifier",
        "--urgency=normal",
        "100% Passed",
        "3 tests passed",
    ]


def test_build_command_for_interactive_notification() -> None:
    """Registers one action per label and passes icon and expiry."""
    service = NotifySendService(
        config=NotifySendConfig(urgency="critical", expire_time=5000)
    )
    payload = NotificationPayload(
        title="34% Failed",
        message="1 of 3 tests failed",
        icon=Path("/icons/logo.png"),
        actions=("Run again", "Exit tests"),
        close_label="Close",
    )

    assert service.build_command(payload) == [
        "notify-send",
        "--app-name=run-notifier",
        "--urgency=critical",
        "--expire-time=5000",
        "--icon=/icons/logo.png",
        "--action=Run again=Run again",
        "--action=Exit tests=Exit tests",
        "34% Failed",
        "1 of 3 tests failed",
    ]


async def test_send_reports_chosen_action() -> None:
    """Turns the printed action name into activation metadata."""
    service = NotifySendService(config=NotifySendConfig())
    payload = NotificationPayload(
        title="t", message="m", actions=("Run again", "Exit tests")
    )

    with patch.object(
        NotifySendService, "_run_command", new_callable=AsyncMock
    ) as run_command:
        run_command.return_value = "Run again"
        metadata = await service.send(payload)

    assert metadata == NotificationMetadata(
        activation_type="actionClicked", activation_value="Run again"
    )


async def test_send_dismissed_returns_none() -> None:
    """Returns None when the notification closes without an action."""
    service = NotifySendService(config=NotifySendConfig())
    payload = NotificationPayload(title="t", message="m", actions=("Run again",))

    with patch.object(
        NotifySendService, "_run_command", new_callable=AsyncMock
    ) as run_command:
        run_command.return_value = ""
        metadata = await service.send(payload)

    assert metadata is None


async def test_send_without_actions_ignores_output() -> None:
    """Never reports a response for non-interactive notifications."""
    service = NotifySendService(config=NotifySendConfig())

    with patch.object(
        NotifySendService, "_run_command", new_callable=AsyncMock
    ) as run_command:
        run_command.return_value = "42"
        metadata = await service.send(NotificationPayload(title="t", message="m"))

    assert metadata is None
