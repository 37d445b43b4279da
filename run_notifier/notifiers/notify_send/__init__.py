"""notify-send backend module."""

from run_notifier.notifiers.notify_send.config import NotifySendConfig
from run_notifier.notifiers.notify_send.manifest import notify_send_manifest
from run_notifier.notifiers.notify_send.service import NotifySendService

__all__ = ["NotifySendConfig", "NotifySendService", "notify_send_manifest"]
