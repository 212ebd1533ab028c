"""
ICMP reachability through the platform ping utility.

Raw ICMP sockets need elevated privileges on most systems, so beepboop shells
out to the ping binary instead and only looks at its exit status.
"""

import asyncio
import contextlib
import logging
import platform
from typing import List, Optional

from beepboop.errors import InvalidTargetError, PingSubprocessError

# Module logger
logger = logging.getLogger(__name__)

PING_BINARY = "ping"
DEFAULT_TIMEOUT_MS = 1000


def build_ping_args(target: str, timeout: float, system: Optional[str] = None) -> List[str]:
    """
    Build the arguments for a single ping attempt on the current platform.

    Windows expects the timeout in milliseconds (-w), while macOS and the other
    Unix-like systems expect whole seconds (-W) with a floor of one second.

    Args:
        target: Host name or IP address, appended unmodified as the last argument.
        timeout: Timeout in seconds.
        system: Platform name as returned by platform.system(). Detected when omitted.

    Returns:
        List[str]: The arguments to pass to the ping binary.

    Raises:
        InvalidTargetError: If the target is empty.
    """
    if not target.strip():
        raise InvalidTargetError("icmp target is empty")

    system = system if system is not None else platform.system()
    if system == "Windows":
        timeout_ms = int(timeout * 1000)
        if timeout_ms <= 0:
            timeout_ms = DEFAULT_TIMEOUT_MS
        return ["-n", "1", "-w", str(timeout_ms), target]

    # Darwin and every other Unix-like system share the same flags.
    timeout_s = max(int(timeout), 1)
    return ["-c", "1", "-W", str(timeout_s), target]


async def ping(target: str, timeout: float) -> bool:
    """
    Run the ping utility once against the target.

    A non-zero exit status from a process that ran to completion means the
    host did not answer, which is a normal "down" result rather than an error.
    If the surrounding task is cancelled the process is killed and reaped
    before the cancellation is propagated.

    Args:
        target: Host name or IP address.
        timeout: Timeout in seconds handed to ping.

    Returns:
        bool: True if ping exited with status 0.

    Raises:
        PingSubprocessError: If the ping binary could not be started.
    """
    args = build_ping_args(target, timeout)
    logger.debug(f"Running {PING_BINARY} {' '.join(args)}")

    try:
        process = await asyncio.create_subprocess_exec(
            PING_BINARY,
            *args,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.DEVNULL,
            stderr=asyncio.subprocess.DEVNULL,
        )
    except OSError as err:
        raise PingSubprocessError(f"failed to run {PING_BINARY}: {err}") from err

    try:
        return_code = await process.wait()
    except asyncio.CancelledError:
        if process.returncode is None:
            with contextlib.suppress(ProcessLookupError):
                process.kill()
            await process.wait()
        raise

    logger.debug(f"{PING_BINARY} exited with status {return_code}")
    return return_code == 0
