"""Runtime configuration for the notifier."""

from collections.abc import Sequence
from pathlib import Path
from typing import Literal, get_args

from pydantic import Field

from run_notifier.models.base import Model

NotifyMode = Literal[
    "always", "success", "failure", "change", "success-change", "failure-change"
]

NOTIFY_MODES: Sequence[str] = get_args(NotifyMode)


class NotifierConfig(Model):
    """Configuration of a notifier session."""

    notify: bool = Field(default=True, description="Send desktop notifications")
    notify_mode: NotifyMode = Field(
        default="failure-change", description="Which outcomes trigger a notification"
    )
    notifier: str = Field(
        default="auto", description="Notification backend key, or 'auto'"
    )
    icon: Path | None = Field(default=None, description="Icon shown on notifications")
    test_command: Sequence[str] = Field(
        default=("pytest",), min_length=1, description="pytest-compatible command"
    )
    root: Path = Field(default=Path("."), description="Directory to run tests in")
    watch: bool = Field(default=False, description="Keep running after each run")
    rerun_interval: float | None = Field(
        default=None,
        gt=0,
        description="Seconds between automatic re-runs in watch mode",
    )
