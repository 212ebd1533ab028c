#!/usr/bin/env python3
"""
Mock server for trying beepboop by hand.

This server simulates a service that is still starting up:
- for the first DOWN_SECONDS after start, every request gets 503
- afterwards, "/" redirects to "/ready", which answers 200
- "/chain?count=N" redirects N more times before answering 200

Run it, then point beepboop at it:

    python utils/mock_server.py
    beepboop --target http://localhost:8080 --interval 1s
"""

import argparse
import time

from aiohttp import web

# Constants
PORT = 8080
HOST = "localhost"
DOWN_SECONDS = 10.0

STARTED_AT_KEY = web.AppKey("started_at", float)
DOWN_SECONDS_KEY = web.AppKey("down_seconds", float)


def _is_up(request: web.Request) -> bool:
    app = request.app
    return time.monotonic() - app[STARTED_AT_KEY] >= app[DOWN_SECONDS_KEY]


async def handle_root(request: web.Request) -> web.Response:
    """
    Redirect to /ready once the simulated start-up delay has elapsed.

    Args:
        request: The incoming HTTP request

    Returns:
        503 while starting, otherwise a redirect to /ready
    """
    if not _is_up(request):
        return web.Response(status=503, text="starting")
    raise web.HTTPFound("/ready")


async def handle_ready(request: web.Request) -> web.Response:
    if not _is_up(request):
        return web.Response(status=503, text="starting")
    return web.Response(text="ready")


async def handle_chain(request: web.Request) -> web.Response:
    """Redirect `count` more times, then answer 200."""
    count = int(request.query.get("count", "0"))
    if count > 0:
        raise web.HTTPFound(f"/chain?count={count - 1}")
    return web.Response(text="end of chain")


def init_app(down_seconds: float = DOWN_SECONDS) -> web.Application:
    """
    Initialize the web application.

    Args:
        down_seconds: How long the server reports 503 after start.

    Returns:
        Configured aiohttp web Application
    """
    app = web.Application()
    app[STARTED_AT_KEY] = time.monotonic()
    app[DOWN_SECONDS_KEY] = down_seconds
    app.add_routes(
        [
            web.get("/", handle_root),
            web.get("/ready", handle_ready),
            web.get("/chain", handle_chain),
        ]
    )
    return app


def run_server() -> None:
    """Run the mock server on HOST:PORT."""
    parser = argparse.ArgumentParser(description="Mock service that becomes ready after a delay.")
    parser.add_argument("--down-seconds", type=float, default=DOWN_SECONDS)
    parser.add_argument("--port", type=int, default=PORT)
    args = parser.parse_args()

    print(f"Starting mock server at http://{HOST}:{args.port}")
    print(f"- 503 for the first {args.down_seconds:g}s, then 200 on / (via redirect)")
    web.run_app(init_app(args.down_seconds), host=HOST, port=args.port)


if __name__ == "__main__":
    run_server()
