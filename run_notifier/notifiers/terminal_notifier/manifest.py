"""terminal-notifier backend manifest."""

from run_notifier.notifiers.manifest import NotifierManifest
from run_notifier.notifiers.terminal_notifier.config import TerminalNotifierConfig
from run_notifier.notifiers.terminal_notifier.service import TerminalNotifierService

terminal_notifier_manifest = NotifierManifest(
    config_cls=TerminalNotifierConfig,
    service_factory=TerminalNotifierService.from_config,
)
