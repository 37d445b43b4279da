"""Configuration for the terminal-notifier backend."""

from pydantic import BaseModel


class TerminalNotifierConfig(BaseModel):
    """Configuration for the terminal-notifier backend."""

    executable: str = "terminal-notifier"
    group: str | None = None
    sound: str | None = None
