"""Configuration for the logging backend."""

from pydantic import BaseModel


class LogNotifierConfig(BaseModel):
    """Configuration for the logging backend."""

    logger_name: str = "run_notifier.notifications"
