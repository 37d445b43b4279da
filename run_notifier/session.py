"""Watch session running the test suite and reporting each completed run."""

import asyncio
import logging
import tempfile
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path

from run_notifier.junit import missing_report_result, parse_report
from run_notifier.models.config import NotifierConfig
from run_notifier.models.result import AggregatedResult, RunContext
from run_notifier.models.state import RunState
from run_notifier.reporters.base import ReporterDispatcher

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class RerunRequest:
    """Request to run the suite again with the given configuration."""

    config: NotifierConfig


@dataclass(frozen=True, kw_only=True)
class ExitRequest:
    """Request to end the session with the given exit code."""

    code: int


@dataclass(kw_only=True)
class WatchSession:
    """Runs the test command and reports each completed run.

    The session owns the run history shared by its reporters. Re-run and exit
    requests may arrive at any time, e.g. from an interactive notification,
    and are served once the current run has completed.
    """

    config: NotifierConfig
    dispatcher: ReporterDispatcher = field(default_factory=ReporterDispatcher)
    state: RunState = field(default_factory=RunState)
    _requests: asyncio.Queue[RerunRequest | ExitRequest] = field(
        default_factory=asyncio.Queue, init=False, repr=False
    )

    def start_run(self, config: NotifierConfig) -> None:
        """Queue a re-run of the suite."""
        self._requests.put_nowait(RerunRequest(config=config))

    def request_exit(self, code: int) -> None:
        """Queue the end of the session."""
        self._requests.put_nowait(ExitRequest(code=code))

    async def run(self) -> int:
        """Run the suite until the session ends and return the exit code.

        Without watch mode the session ends after the first run. In watch
        mode it waits for re-run or exit requests, re-running on its own
        every ``rerun_interval`` seconds when configured.

        Returns:
            The requested exit code, or 1 if the last run failed and 0 if
            it passed

        """
        while True:
            result = await self.run_once()
            if not self.config.watch:
                return 0 if result.success else 1

            request = await self._next_request()
            if isinstance(request, ExitRequest):
                log.info("Ending session (exit code %d)", request.code)
                return request.code

            self.config = request.config

    async def run_once(self) -> AggregatedResult:
        """Run the test command once and dispatch its result to the reporters."""
        with tempfile.TemporaryDirectory(prefix="run-notifier-") as tmp:
            report_path = Path(tmp) / "report.xml"
            try:
                returncode = await self._run_command(report_path)
            except OSError as e:
                log.error("Could not start test command, counting as errored: %s", e)
                result = missing_report_result()
            else:
                log.info("Test command exited with code %d", returncode)
                try:
                    result = parse_report(report_path)
                except (FileNotFoundError, ET.ParseError) as e:
                    log.warning("No usable test report, counting run as errored: %s", e)
                    result = missing_report_result()

        context = RunContext(
            root=str(self.config.root), command=tuple(self.config.test_command)
        )
        self.dispatcher.on_run_complete({context}, result)
        return result

    async def _run_command(self, report_path: Path) -> int:
        command = [*self.config.test_command, f"--junitxml={report_path}"]
        log.info("Running tests: %s", " ".join(command))

        process = await asyncio.create_subprocess_exec(*command, cwd=self.config.root)
        return await process.wait()

    async def _next_request(self) -> RerunRequest | ExitRequest:
        if self.config.rerun_interval is None:
            return await self._requests.get()

        try:
            return await asyncio.wait_for(
                self._requests.get(), timeout=self.config.rerun_interval
            )
        except TimeoutError:
            log.info("No request within %.1fs, re-running", self.config.rerun_interval)
            return RerunRequest(config=self.config)
