"""Loading of notification backends from entry points."""

import shutil
import sys
from importlib.metadata import entry_points
from typing import Any

from run_notifier.notifiers.manifest import NotifierManifest

ENTRY_POINT_GROUP = "run_notifier.notifiers"


class NotifierNotFoundError(Exception):
    """Raised when a notification backend is not found."""


def resolve_notifier_key(key: str, platform: str = sys.platform) -> str:
    """Map the 'auto' key to the backend suited for the platform."""
    if key != "auto":
        return key
    if platform == "darwin":
        return "terminal-notifier"
    if shutil.which("notify-send") is not None:
        return "notify-send"
    return "log"


def load_notifier_manifest(key: str) -> NotifierManifest[Any]:
    """Load a notifier manifest by key.

    Args:
        key: The backend key as registered in pyproject.toml
             (e.g., "terminal-notifier", "notify-send")

    Returns:
        The notifier manifest instance

    Raises:
        NotifierNotFoundError: If no backend with the given key is found

    """
    entries = entry_points(group=ENTRY_POINT_GROUP)

    for entry in entries:
        if entry.name == key:
            manifest: NotifierManifest[Any] = entry.load()
            return manifest

    available = sorted(e.name for e in entries)
    raise NotifierNotFoundError(
        f"Notifier '{key}' not found. Available notifiers: {available}"
    )
