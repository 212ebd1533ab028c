"""
HTTP client configuration module for beepboop.

This module creates the aiohttp session shared by every HTTP check of a run.
"""

import logging

import aiohttp

# Module logger
logger = logging.getLogger(__name__)


def get_http_session(timeout: float) -> aiohttp.ClientSession:
    """
    Create the HTTP client session used by the checker.

    The timeout is applied as the overall deadline of each request, redirects
    included. The session must be created from inside a running event loop
    and closed when the run ends.

    Args:
        timeout: Per-request deadline in seconds.

    Returns:
        aiohttp.ClientSession: The configured session.
    """
    logger.debug(f"Creating HTTP session with a {timeout}s timeout")
    return aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=timeout))
