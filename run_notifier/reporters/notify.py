"""Reporter sending desktop notifications for completed runs."""

import logging
import sys
from collections.abc import Callable
from collections.abc import Set as AbstractSet
from dataclasses import dataclass, field
from functools import partial

from run_notifier.dispatch import dispatch
from run_notifier.models.config import NotifierConfig
from run_notifier.models.result import AggregatedResult, RunContext
from run_notifier.models.state import RunState
from run_notifier.notifiers.base import NotificationService
from run_notifier.policy import build_payload, decide, update_state

log = logging.getLogger(__name__)


@dataclass(kw_only=True)
class NotifyReporter:
    """Notify the user about run outcomes according to the notification mode.

    The run history lives in ``state``, which is owned by the caller and may
    be shared with other reporters of the same session.
    """

    service: NotificationService
    state: RunState
    config: NotifierConfig
    start_run: Callable[[NotifierConfig], None]
    exit_process: Callable[[int], None] = sys.exit
    platform: str = field(default=sys.platform, repr=False)

    def on_run_complete(
        self, contexts: AbstractSet[RunContext], result: AggregatedResult
    ) -> None:
        """Decide on, send, and record the notification for a run."""
        decision = decide(self.state, result, self.config.notify_mode)
        log.debug(
            "Notification decision: %s (mode=%s, success=%s, state=%s)",
            decision,
            self.config.notify_mode,
            result.success,
            self.state,
        )

        if decision is not None:
            payload = build_payload(decision, result, self.config.icon, self.platform)
            dispatch(
                self.service,
                decision,
                payload,
                partial(self.start_run, self.config),
                self.exit_process,
            )

        update_state(self.state, result, decision)
