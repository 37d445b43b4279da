"""CLI entry point for the test run notifier."""

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from run_notifier.models.config import NOTIFY_MODES, NotifierConfig
from run_notifier.notifiers.loading import (
    NotifierNotFoundError,
    load_notifier_manifest,
    resolve_notifier_key,
)
from run_notifier.reporters.notify import NotifyReporter
from run_notifier.reporters.summary import SummaryReporter
from run_notifier.session import WatchSession

CONFIG_ERROR_EXIT_CODE = 2


async def run(config: NotifierConfig, notifier_config_json: str = "{}") -> int:
    """Run the test session and return exit code."""
    log = logging.getLogger("run_notifier")

    key = resolve_notifier_key(config.notifier)
    log.info("Loading notifier: %s", key)
    manifest = load_notifier_manifest(key)
    notifier_config = manifest.config_cls.model_validate_json(notifier_config_json)

    session = WatchSession(config=config)
    session.dispatcher.register(SummaryReporter())

    async with manifest.service_factory(notifier_config) as service:
        if config.notify:
            session.dispatcher.register(
                NotifyReporter(
                    service=service,
                    state=session.state,
                    config=config,
                    start_run=session.start_run,
                    exit_process=session.request_exit,
                )
            )
        return await session.run()


def build_config(args: argparse.Namespace) -> NotifierConfig:
    """Build the session configuration from parsed arguments."""
    command = list(args.command)
    if command and command[0] == "--":
        command = command[1:]

    values: dict[str, object] = {
        "notify": args.notify,
        "notify_mode": args.notify_mode,
        "notifier": args.notifier,
        "icon": args.icon,
        "root": args.root,
        "watch": args.watch,
        "rerun_interval": args.rerun_interval,
    }
    if command:
        values["test_command"] = command
    return NotifierConfig.model_validate(values)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        description="Run a test suite and send desktop notifications on its outcome"
    )
    parser.add_argument(
        "--notify-mode",
        choices=NOTIFY_MODES,
        default="failure-change",
        help="Which run outcomes trigger a notification",
    )
    parser.add_argument(
        "--no-notify",
        dest="notify",
        action="store_false",
        help="Only log run summaries",
    )
    parser.add_argument(
        "--notifier",
        default="auto",
        help="Notifier key (terminal-notifier, notify-send, log, auto)",
    )
    parser.add_argument(
        "--notifier-config",
        default="{}",
        help="JSON configuration for the notifier",
    )
    parser.add_argument(
        "--icon",
        type=Path,
        default=None,
        help="Icon shown on notifications",
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=Path("."),
        help="Directory to run the tests in",
    )
    parser.add_argument(
        "--watch",
        action="store_true",
        help="Keep the session open to re-run tests on request",
    )
    parser.add_argument(
        "--rerun-interval",
        type=float,
        default=None,
        help="In watch mode, re-run automatically after this many seconds",
    )
    parser.add_argument(
        "command",
        nargs=argparse.REMAINDER,
        help="pytest-compatible test command, after '--' (default: pytest)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    log = logging.getLogger("run_notifier")

    try:
        config = build_config(args)
        exit_code = asyncio.run(run(config, args.notifier_config))
    except (ValidationError, NotifierNotFoundError) as e:
        log.error("Invalid configuration: %s", e)
        exit_code = CONFIG_ERROR_EXIT_CODE
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
