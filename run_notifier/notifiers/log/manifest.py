"""Logging backend manifest."""

from run_notifier.notifiers.log.config import LogNotifierConfig
from run_notifier.notifiers.log.service import LogNotificationService
from run_notifier.notifiers.manifest import NotifierManifest

log_manifest = NotifierManifest(
    config_cls=LogNotifierConfig,
    service_factory=LogNotificationService.from_config,
)
