"""
Reachability checker implementation.

This module provides the Checker class, which answers "is the target up?" for
the three supported modes. HTTP and HTTPS targets are checked with a GET
request through a shared aiohttp session; ICMP targets are checked with the
platform ping utility.
"""

import asyncio
import logging
from typing import Optional

import aiohttp

from beepboop.checker.ping import ping
from beepboop.contracts import TargetChecker
from beepboop.domain import CheckMode, CheckOptions
from beepboop.errors import CheckError, TransportError

# Module logger
logger = logging.getLogger(__name__)

MAX_REDIRECTS = 10
RETRY_DELAY_SECONDS = 0.15

DEFAULT_SUCCESS_MIN = 200
DEFAULT_SUCCESS_MAX = 399


class Checker(TargetChecker):
    """
    Checks a single target with the configured mode.

    The checker holds no state beyond its options and the shared HTTP session,
    so the same instance is reused for every check of a run.
    """

    def __init__(self, options: CheckOptions, session: aiohttp.ClientSession) -> None:
        """
        Initializes the checker.

        Args:
            options: Resolved check options.
            session: An aiohttp.ClientSession configured with the check timeout.
                     It is only used for HTTP and HTTPS targets.
        """
        self._options: CheckOptions = options
        self._session: aiohttp.ClientSession = session

    @property
    def options(self) -> CheckOptions:
        return self._options

    async def check_with_retries(self, retries: int) -> bool:
        if retries < 0:
            raise ValueError("retries must be >= 0")

        attempts = retries + 1
        last_error: Optional[CheckError] = None

        for attempt in range(1, attempts + 1):
            try:
                if await self.check_once():
                    logger.debug(f"Attempt {attempt}/{attempts}: target is up")
                    return True
                logger.debug(f"Attempt {attempt}/{attempts}: target is down")
            except CheckError as err:
                logger.debug(f"Attempt {attempt}/{attempts} failed: {err}")
                last_error = err

            if attempt < attempts:
                await asyncio.sleep(RETRY_DELAY_SECONDS)

        if last_error is not None:
            raise last_error
        return False

    async def check_once(self) -> bool:
        mode = self._options.mode
        if mode is CheckMode.ICMP:
            return await ping(self._options.target, self._options.timeout)
        elif mode in (CheckMode.HTTP, CheckMode.HTTPS):
            return await self._check_http()
        raise CheckError(f"unsupported mode {mode!r}")

    async def _check_http(self) -> bool:
        """
        Performs a GET request against the target URL.

        Redirects are followed up to MAX_REDIRECTS times; one more redirect
        fails the check instead of being reported as the final response.

        Returns:
            bool: Whether the final status code counts as up.

        Raises:
            TransportError: On DNS, connection, timeout or redirect-limit failures.
        """
        url = self._options.target
        try:
            # aiohttp gives up once the redirect count reaches max_redirects,
            # so following MAX_REDIRECTS hops needs one extra.
            async with self._session.get(
                url, allow_redirects=True, max_redirects=MAX_REDIRECTS + 1
            ) as response:
                status_code = response.status
        except aiohttp.TooManyRedirects as err:
            raise TransportError(f"GET {url}: stopped after {MAX_REDIRECTS} redirects") from err
        except asyncio.TimeoutError as err:
            raise TransportError(f"GET {url}: timed out after {self._options.timeout:g}s") from err
        except aiohttp.ClientError as err:
            raise TransportError(f"GET {url}: {err}") from err

        logger.debug(f"GET {url} returned {status_code}")
        return self._is_expected_status(status_code)

    def _is_expected_status(self, status_code: int) -> bool:
        expected = self._options.expected_statuses
        if not expected:
            return DEFAULT_SUCCESS_MIN <= status_code <= DEFAULT_SUCCESS_MAX
        return status_code in expected
