"""notify-send (libnotify) notification service."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import dataclass

from run_notifier.models.notification import NotificationMetadata, NotificationPayload
from run_notifier.notifiers.base import NotificationService
from run_notifier.notifiers.notify_send.config import NotifySendConfig


@dataclass(frozen=True, kw_only=True)
class NotifySendService(NotificationService):
    """Notification service backed by the notify-send command.

    Actions are registered as ``--action=<label>=<label>``; notify-send waits
    for the notification to close and prints the name of the chosen action.
    """

    config: NotifySendConfig

    @classmethod
    @asynccontextmanager
    async def from_config(
        cls, config: NotifySendConfig
    ) -> AsyncGenerator["NotifySendService", None]:
        """Create service and cancel pending responses on exit."""
        service = cls(config=config)
        try:
            yield service
        finally:
            await service.aclose()

    def build_command(self, payload: NotificationPayload) -> list[str]:
        """Build the notify-send argument list for a payload."""
        argv = [
            self.config.executable,
            f"--app-name={self.config.app_name}",
            f"--urgency={self.config.urgency}",
        ]
        if self.config.expire_time is not None:
            argv.append(f"--expire-time={self.config.expire_time}")
        if payload.icon is not None:
            argv.append(f"--icon={payload.icon}")
        argv += [f"--action={action}={action}" for action in payload.actions]
        argv += [payload.title, payload.message]
        return argv

    async def send(self, payload: NotificationPayload) -> NotificationMetadata | None:
        """Show the notification and report the chosen action, if any."""
        output = await self._run_command(*self.build_command(payload))
        if not payload.actions or not output:
            return None

        return NotificationMetadata(
            activation_type="actionClicked",
            activation_value=output.splitlines()[-1],
        )
