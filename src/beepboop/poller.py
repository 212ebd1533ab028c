"""
Polling driver for beepboop.

This module provides the WaitPoller class, which repeatedly asks a checker
whether the target is up, at a fixed interval, until it is. Cancellation of
the running task is the only other way out of the loop and always wins over
any pending retry or polling round.
"""

import asyncio
import logging

from beepboop.contracts import SignalEmitter, TargetChecker
from beepboop.domain import Outcome
from beepboop.errors import CheckError
from beepboop.output import Reporter


class WaitPoller:
    """
    Drives a checker until the target answers.

    One polling round is a single check_with_retries call. Rounds start on a
    fixed wall-clock interval; a round that takes longer than the interval is
    followed immediately by the next one.
    """

    def __init__(
        self,
        checker: TargetChecker,
        emitter: SignalEmitter,
        reporter: Reporter,
        interval: float,
        retries: int,
    ) -> None:
        """
        Initializes a new WaitPoller instance.

        Args:
            checker: Component that checks the target.
            emitter: Side effect triggered once the target is up.
            reporter: Prints the user-facing narration.
            interval: Seconds between the start of two polling rounds.
            retries: Additional attempts per round.
        """
        self._checker: TargetChecker = checker
        self._emitter: SignalEmitter = emitter
        self._reporter: Reporter = reporter
        self._interval: float = interval
        self._retries: int = retries
        self._logger: logging.Logger = logging.getLogger(__name__)

    async def run_once(self) -> Outcome:
        """
        Performs a single polling round and reports its result.

        Returns:
            Outcome: UP, DOWN, or FAILED when the last attempt raised an error.
        """
        try:
            is_up = await self._checker.check_with_retries(self._retries)
        except CheckError as err:
            self._reporter.failed(err)
            return Outcome.FAILED

        if is_up:
            return self._signal_up()
        self._reporter.down()
        return Outcome.DOWN

    async def run(self) -> Outcome:
        """
        Polls until the target is up.

        Errors raised by a round are reported as part of the waiting narration
        and never stop the loop.

        Returns:
            Outcome: Always UP; cancellation propagates as asyncio.CancelledError.
        """
        loop = asyncio.get_running_loop()
        round_number = 0

        while True:
            round_number += 1
            started = loop.time()
            self._logger.debug(f"Starting polling round {round_number}")

            try:
                if await self._checker.check_with_retries(self._retries):
                    self._logger.info(f"Target up after {round_number} round(s)")
                    return self._signal_up()
                self._reporter.waiting()
            except CheckError as err:
                self._reporter.waiting(err)

            elapsed = loop.time() - started
            await asyncio.sleep(max(0.0, self._interval - elapsed))

    def _signal_up(self) -> Outcome:
        self._emitter.emit()
        self._reporter.up()
        return Outcome.UP
