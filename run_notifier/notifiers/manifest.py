"""Notifier manifest definition for the plugin system."""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass
from typing import Generic, TypeVar

from pydantic import BaseModel

from run_notifier.notifiers.base import NotificationService

ConfigT = TypeVar("ConfigT", bound=BaseModel)


@dataclass(frozen=True, kw_only=True)
class NotifierManifest(Generic[ConfigT]):
    """Manifest describing a notification backend.

    The manifest contains references to the configuration class and the
    service factory so that backends are only imported when selected by key.
    """

    config_cls: type[ConfigT]
    service_factory: Callable[
        [ConfigT], AbstractAsyncContextManager[NotificationService]
    ]
