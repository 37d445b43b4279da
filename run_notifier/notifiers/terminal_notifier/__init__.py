"""terminal-notifier backend module."""

from run_notifier.notifiers.terminal_notifier.config import TerminalNotifierConfig
from run_notifier.notifiers.terminal_notifier.manifest import terminal_notifier_manifest
from run_notifier.notifiers.terminal_notifier.service import TerminalNotifierService

__all__ = [
    "TerminalNotifierConfig",
    "TerminalNotifierService",
    "terminal_notifier_manifest",
]
