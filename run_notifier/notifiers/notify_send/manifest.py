"""notify-send backend manifest."""

from run_notifier.notifiers.manifest import NotifierManifest
from run_notifier.notifiers.notify_send.config import NotifySendConfig
from run_notifier.notifiers.notify_send.service import NotifySendService

notify_send_manifest = NotifierManifest(
    config_cls=NotifySendConfig,
    service_factory=NotifySendService.from_config,
)
