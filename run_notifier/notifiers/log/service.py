"""Notification service that writes notifications to the log."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import dataclass

from run_notifier.models.notification import NotificationMetadata, NotificationPayload
from run_notifier.notifiers.base import NotificationService
from run_notifier.notifiers.log.config import LogNotifierConfig


@dataclass(frozen=True, kw_only=True)
class LogNotificationService(NotificationService):
    """Fallback for hosts without a desktop notification tool.

    Never interactive: actions are listed in the log line but no response
    is ever reported.
    """

    config: LogNotifierConfig

    @classmethod
    @asynccontextmanager
    async def from_config(
        cls, config: LogNotifierConfig
    ) -> AsyncGenerator["LogNotificationService", None]:
        """Create service and cancel pending deliveries on exit."""
        service = cls(config=config)
        try:
            yield service
        finally:
            await service.aclose()

    async def send(self, payload: NotificationPayload) -> NotificationMetadata | None:
        """Log the notification title and message."""
        logger = logging.getLogger(self.config.logger_name)
        if payload.actions:
            actions = ", ".join(payload.actions)
            logger.info("%s: %s [%s]", payload.title, payload.message, actions)
        else:
            logger.info("%s: %s", payload.title, payload.message)
        return None
