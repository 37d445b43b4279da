"""Configuration for the notify-send backend."""

from typing import Literal

from pydantic import BaseModel


class NotifySendConfig(BaseModel):
    """Configuration for the notify-send backend."""

    executable: str = "notify-send"
    app_name: str = "run-notifier"
    urgency: Literal["low", "normal", "critical"] = "normal"
    # Milliseconds; None leaves the notification server default
    expire_time: int | None = None
