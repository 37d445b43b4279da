"""Run-complete observers and the dispatcher that fans events out to them."""

import logging
from collections.abc import Set as AbstractSet
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol

from run_notifier.models.result import AggregatedResult, RunContext

log = logging.getLogger(__name__)


class Reporter(Protocol):
    """Anything that wants to observe completed runs."""

    def on_run_complete(
        self, contexts: AbstractSet[RunContext], result: AggregatedResult
    ) -> None:
        """Handle the aggregated result of a completed run."""


@dataclass(kw_only=True)
class ReporterDispatcher:
    """Ordered collection of reporters receiving run-complete events."""

    _reporters: list[Reporter] = field(default_factory=list, init=False)

    @property
    def reporters(self) -> Sequence[Reporter]:
        """Registered reporters, in registration order."""
        return tuple(self._reporters)

    def register(self, reporter: Reporter) -> None:
        """Add a reporter."""
        self._reporters.append(reporter)

    def unregister(self, reporter: Reporter | type) -> None:
        """Remove a reporter instance, or every reporter of the given class."""
        if isinstance(reporter, type):
            self._reporters = [
                r for r in self._reporters if not isinstance(r, reporter)
            ]
        else:
            self._reporters = [r for r in self._reporters if r is not reporter]

    def on_run_complete(
        self, contexts: AbstractSet[RunContext], result: AggregatedResult
    ) -> None:
        """Forward a completed run to every reporter.

        A reporter raising does not prevent the others from running.
        """
        for reporter in self._reporters:
            try:
                reporter.on_run_complete(contexts, result)
            except Exception as e:
                log.error(
                    "Reporter %s failed: %s", type(reporter).__name__, e, exc_info=e
                )
