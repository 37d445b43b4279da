"""terminal-notifier (macOS) notification service."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import dataclass

from run_notifier.models.notification import NotificationMetadata, NotificationPayload
from run_notifier.notifiers.base import NotificationService
from run_notifier.notifiers.terminal_notifier.config import TerminalNotifierConfig

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class TerminalNotifierService(NotificationService):
    """Notification service backed by the terminal-notifier command.

    Requires a terminal-notifier build that understands ``-actions`` and
    ``-json``; the JSON printed once the user interacts carries the
    activation type and value.
    """

    config: TerminalNotifierConfig

    @classmethod
    @asynccontextmanager
    async def from_config(
        cls, config: TerminalNotifierConfig
    ) -> AsyncGenerator["TerminalNotifierService", None]:
        """Create service and cancel pending responses on exit."""
        service = cls(config=config)
        try:
            yield service
        finally:
            await service.aclose()

    def build_command(self, payload: NotificationPayload) -> list[str]:
        """Build the terminal-notifier argument list for a payload."""
        argv = [
            self.config.executable,
            "-title",
            payload.title,
            "-message",
            payload.message,
            "-json",
        ]
        if payload.icon is not None:
            argv += ["-appIcon", str(payload.icon)]
        if self.config.group:
            argv += ["-group", self.config.group]
        if self.config.sound:
            argv += ["-sound", self.config.sound]
        if payload.actions:
            argv += ["-actions", ",".join(payload.actions)]
        if payload.close_label:
            argv += ["-closeLabel", payload.close_label]
        return argv

    async def send(self, payload: NotificationPayload) -> NotificationMetadata | None:
        """Show the notification and parse the JSON response, if any."""
        output = await self._run_command(*self.build_command(payload))
        if not output:
            return None

        metadata = NotificationMetadata.model_validate_json(output)
        log.debug("terminal-notifier response: %s", metadata)
        return metadata
