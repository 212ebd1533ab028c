"""
Main entry point for beepboop.

This module parses the run configuration, sets up logging, builds the checker
and the polling driver, and maps the result of the run to a process exit code.
SIGINT and SIGTERM cancel the running task, which unwinds every pending HTTP
request, ping subprocess and sleep.
"""

import asyncio
import logging
import os
import signal
import sys
from typing import List, Optional

import aiohttp

from beepboop.beep import TerminalBell
from beepboop.checker.reachability_checker import Checker
from beepboop.config import get_context
from beepboop.config.http_config import get_http_session
from beepboop.config.logging_config import configure_logging
from beepboop.config.run_context import RunContext
from beepboop.domain import EXIT_SUCCESS, EXIT_USAGE, CheckOptions, Outcome
from beepboop.errors import UsageError, ValidationError
from beepboop.output import Colorizer, Reporter
from beepboop.poller import WaitPoller
from beepboop.resolver import parse_expected_statuses, resolve_mode_and_target
from beepboop.version import resolve_version

logger: logging.Logger = logging.getLogger(__name__)


async def main(context: RunContext, options: CheckOptions, reporter: Reporter) -> Outcome:
    """
    Run the checker until the run completes or is cancelled.

    Args:
        context: Parsed run configuration.
        options: Resolved check options.
        reporter: Prints the user-facing narration.

    Returns:
        Outcome: The result of the run; CANCELLED when a termination signal arrived.
    """
    _install_signal_handlers(asyncio.current_task())

    http_session: aiohttp.ClientSession = get_http_session(options.timeout)
    logger.debug("configured: http_session")

    poller = WaitPoller(
        checker=Checker(options, http_session),
        emitter=TerminalBell(),
        reporter=reporter,
        interval=context.interval,
        retries=context.retries,
    )

    try:
        if context.once:
            return await poller.run_once()
        return await poller.run()
    except asyncio.CancelledError:
        logger.info("Run cancelled.")
        return Outcome.CANCELLED
    finally:
        await http_session.close()
        logger.debug("Shutdown complete.")


def _install_signal_handlers(task: Optional[asyncio.Task]) -> None:
    if task is None:
        return
    loop = asyncio.get_running_loop()
    for signum in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(signum, task.cancel)
        except NotImplementedError:
            # Windows: SIGINT still arrives as KeyboardInterrupt.
            logger.debug(f"Signal handler for {signum} not supported on this platform")


def run(argv: Optional[List[str]] = None) -> int:
    """
    Command-line entry point.

    Args:
        argv: Arguments to parse. Defaults to sys.argv[1:].

    Returns:
        int: The process exit code.
    """
    try:
        context = get_context(argv)
    except UsageError as err:
        print(f"usage error: {err}", file=sys.stderr)
        return EXIT_USAGE

    version = resolve_version()
    if context.show_version:
        print(version)
        return EXIT_SUCCESS

    try:
        configure_logging(context)
    except (ValueError, RuntimeError) as err:
        print(f"usage error: {err}", file=sys.stderr)
        return EXIT_USAGE

    try:
        expected_statuses = parse_expected_statuses(context.status)
    except ValidationError as err:
        print(f"invalid --status: {err}", file=sys.stderr)
        return EXIT_USAGE

    try:
        mode, target = resolve_mode_and_target(context.mode, context.target)
    except ValidationError as err:
        print(f"target error: {err}", file=sys.stderr)
        return EXIT_USAGE

    options = CheckOptions(
        mode=mode,
        target=target,
        timeout=context.timeout,
        expected_statuses=expected_statuses,
    )
    colors = Colorizer.detect(context.no_color, os.environ, sys.stdout)
    reporter = Reporter(colors, out=sys.stdout, err=sys.stderr, quiet=context.quiet)
    reporter.banner(version, options, context.interval, context.retries, context.once)

    try:
        outcome = asyncio.run(main(context, options, reporter))
    except KeyboardInterrupt:
        outcome = Outcome.CANCELLED

    logger.debug(f"Finished with outcome {outcome.value}")
    return outcome.exit_code


if __name__ == "__main__":
    sys.exit(run())
