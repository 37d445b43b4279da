"""Hand notification decisions to a notification service."""

import logging
from collections.abc import Callable

from run_notifier.models.notification import NotificationMetadata, NotificationPayload
from run_notifier.notifiers.base import NotificationService, ResponseHandler
from run_notifier.policy import QUIT_ANSWER, RESTART_ANSWER, Decision

log = logging.getLogger(__name__)


def make_response_handler(
    on_restart: Callable[[], None],
    on_exit: Callable[[int], None],
) -> ResponseHandler:
    """Build the handler mapping a failure notification response to an action.

    Args:
        on_restart: Called when the user asks to run the tests again
        on_exit: Called with exit code 0 when the user asks to stop

    Returns:
        Handler to register with the notification service

    """

    def handle(
        error: BaseException | None, metadata: NotificationMetadata | None
    ) -> None:
        if error is not None or metadata is None:
            return
        if metadata.activation_value == QUIT_ANSWER:
            log.info("Exit requested from notification")
            on_exit(0)
            return
        if metadata.activation_value == RESTART_ANSWER:
            log.info("Re-run requested from notification")
            on_restart()

    return handle


def dispatch(
    service: NotificationService,
    decision: Decision,
    payload: NotificationPayload,
    on_restart: Callable[[], None],
    on_exit: Callable[[int], None],
) -> None:
    """Send the notification for a decision.

    Success notifications are fire-and-forget. Failure notifications carry
    the re-run and exit actions; the user's choice is handled whenever it
    arrives, without blocking the caller.
    """
    if decision == "success":
        service.notify(payload)
    elif decision == "failure":
        service.notify(payload, make_response_handler(on_restart, on_exit))
