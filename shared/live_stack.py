"""Live-service helpers for the conformance suite."""

from __future__ import annotations

import os
import threading
import time
from collections.abc import Callable, Generator

import requests
from flask import Flask
from werkzeug.serving import BaseWSGIServer, make_server


def is_service_ready(url: str, timeout: float = 2) -> bool:
    """Return True when the company collection endpoint responds with 200."""
    try:
        response = requests.get(f"{url.rstrip('/')}/company", timeout=timeout)
    except requests.RequestException:
        return False
    return response.status_code == 200


def wait_for_service_ready(url: str, timeout: float = 60, interval: float = 1) -> None:
    """Poll the company endpoint until ready or timeout."""
    deadline = time.time() + timeout
    while time.time() < deadline:
        if is_service_ready(url):
            return
        time.sleep(interval)
    raise RuntimeError(f"Company service at {url} not ready after {timeout}s")


def serve_in_background(app: Flask, host: str = "127.0.0.1") -> tuple[str, BaseWSGIServer]:
    """
    Serve ``app`` from a daemon thread on a free port.

    Returns:
        The base URL of the running server and the server itself, so the
        caller can ``shutdown()`` it.
    """
    server = make_server(host, 0, app, threaded=True)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    return f"http://{host}:{server.server_port}", server


def live_service_url(
    *,
    base_url_env: str,
    app_factory: Callable[[], Flask],
    ready_timeout_env: str = "COMPANY_API_READY_TIMEOUT",
    ready_timeout_default: float = 90,
) -> Generator[str, None, None]:
    """
    Yield a ready company service base URL.

    Priority:
    1. Use explicit base URL from `base_url_env` (and wait until ready).
    2. Otherwise serve the app built by `app_factory` in a background
       thread and shut it down on exit.
    """
    provided_base_url = os.getenv(base_url_env)
    if provided_base_url:
        wait_for_service_ready(
            provided_base_url,
            timeout=float(os.getenv(ready_timeout_env, ready_timeout_default)),
        )
        yield provided_base_url.rstrip("/")
        return

    base_url, server = serve_in_background(app_factory())
    try:
        wait_for_service_ready(base_url, timeout=10, interval=0.1)
        yield base_url
    finally:
        server.shutdown()
