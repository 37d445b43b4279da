"""Abstract base class for desktop notification services."""

import asyncio
import logging
import threading
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field

from run_notifier.models.notification import NotificationMetadata, NotificationPayload

log = logging.getLogger(__name__)

ResponseHandler = Callable[[BaseException | None, NotificationMetadata | None], None]


class NotifierCommandError(RuntimeError):
    """Raised when a notification command exits with a non-zero status."""


@dataclass(frozen=True, kw_only=True)
class NotificationService(ABC):
    """Abstract base for platform notification services.

    Delivery is best-effort: ``notify`` never raises and never blocks the
    caller on the user's response.
    Interactive responses are handed to the handler registered with the
    notification, whenever they arrive.
    """

    _pending: set[asyncio.Task[None]] = field(
        default_factory=set, init=False, repr=False, compare=False
    )

    @abstractmethod
    async def send(self, payload: NotificationPayload) -> NotificationMetadata | None:
        """Deliver a notification.

        Args:
            payload: Notification content, with actions for interactive ones

        Returns:
            The user's response for interactive notifications, None when
            there is nothing to report

        """

    def notify(
        self,
        payload: NotificationPayload,
        on_response: ResponseHandler | None = None,
    ) -> None:
        """Schedule delivery of a notification and return immediately.

        Inside a running event loop delivery is a task on that loop. Without
        one, delivery runs on its own event loop in a daemon thread, and the
        handler is called from that thread.
        """
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            threading.Thread(
                target=asyncio.run,
                args=(self._deliver(payload, on_response),),
                name="notification-delivery",
                daemon=True,
            ).start()
            return

        task = loop.create_task(self._deliver(payload, on_response))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def aclose(self, timeout: float = 1.0) -> None:
        """Let in-flight deliveries finish, then cancel those still waiting.

        Args:
            timeout: Seconds to wait before cancelling deliveries that are
                still waiting for a user response

        """
        if not self._pending:
            return

        _, waiting = await asyncio.wait(list(self._pending), timeout=timeout)
        for task in waiting:
            task.cancel()
        await asyncio.gather(*waiting, return_exceptions=True)
        self._pending.clear()

    async def _deliver(
        self,
        payload: NotificationPayload,
        on_response: ResponseHandler | None,
    ) -> None:
        try:
            metadata = await self.send(payload)
        except Exception as e:
            log.warning("Notification delivery failed: %s", e)
            self._respond(on_response, e, None)
            return

        self._respond(on_response, None, metadata)

    def _respond(
        self,
        on_response: ResponseHandler | None,
        error: BaseException | None,
        metadata: NotificationMetadata | None,
    ) -> None:
        if on_response is None:
            return
        try:
            on_response(error, metadata)
        except Exception as e:
            log.warning("Notification response handler failed: %s", e, exc_info=e)

    async def _run_command(self, *argv: str) -> str:
        """Run a notification command and return its stripped stdout."""
        log.debug("Running notification command: %s", argv)
        process = await asyncio.create_subprocess_exec(
            *argv,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        stdout, stderr = await process.communicate()

        if process.returncode != 0:
            raise NotifierCommandError(
                f"{argv[0]} failed ({process.returncode}): {stderr.decode().strip()}"
            )

        return stdout.decode().strip()
