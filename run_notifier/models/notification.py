"""Models for notification payloads and responses."""

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from pydantic import Field

from run_notifier.models.base import Model


@dataclass(frozen=True, kw_only=True)
class NotificationPayload:
    """Content of a single desktop notification."""

    title: str
    message: str
    icon: Path | None = None
    actions: Sequence[str] = ()
    close_label: str | None = None


class NotificationMetadata(Model):
    """User response reported back by an interactive notification."""

    activation_type: str | None = Field(default=None, alias="activationType")
    activation_value: str | None = Field(default=None, alias="activationValue")
