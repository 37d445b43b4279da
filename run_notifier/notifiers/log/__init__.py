"""Logging backend module."""

from run_notifier.notifiers.log.config import LogNotifierConfig
from run_notifier.notifiers.log.manifest import log_manifest
from run_notifier.notifiers.log.service import LogNotificationService

__all__ = ["LogNotificationService", "LogNotifierConfig", "log_manifest"]
