"""Fixtures for browser-driven audit scenarios.

Scenarios need a real browser and the axe-core script, so they only run
with ``A11Y_CHECKER_E2E=1``. Public-site scenarios also need
``A11Y_CHECKER_NETWORK=1``.
"""
from __future__ import annotations

import os
import socket
import threading
from http.server import HTTPServer, SimpleHTTPRequestHandler
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures" / "html"

E2E_ENABLED = os.environ.get("A11Y_CHECKER_E2E", "").lower() in ("true", "1", "yes")
NETWORK_ENABLED = os.environ.get("A11Y_CHECKER_NETWORK", "").lower() in ("true", "1", "yes")


def pytest_collection_modifyitems(config, items):
    skip_browser = pytest.mark.skip(reason="set A11Y_CHECKER_E2E=1 to run browser scenarios")
    skip_network = pytest.mark.skip(reason="set A11Y_CHECKER_NETWORK=1 to audit public pages")
    for item in items:
        if "e2e" in item.keywords and not E2E_ENABLED:
            item.add_marker(skip_browser)
        elif "network" in item.keywords and not NETWORK_ENABLED:
            item.add_marker(skip_network)


class QuietHTTPHandler(SimpleHTTPRequestHandler):
    """HTTP handler that doesn't log to console."""

    def log_message(self, format, *args):
        pass


def find_free_port():
    """Find a free port on localhost."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


class LocalHTTPServer:
    """Context manager for a local HTTP server serving fixture pages."""

    def __init__(self, directory: Path):
        self.directory = directory
        self.port = find_free_port()
        self.server = None
        self.thread = None

    def __enter__(self):
        def handler(*args, **kwargs):
            return QuietHTTPHandler(*args, directory=str(self.directory), **kwargs)

        self.server = HTTPServer(("127.0.0.1", self.port), handler)
        self.thread = threading.Thread(target=self.server.serve_forever, daemon=True)
        self.thread.start()
        return self

    def __exit__(self, *args):
        if self.server:
            self.server.shutdown()
            self.server.server_close()
        if self.thread:
            self.thread.join(timeout=1)

    def url(self, name: str) -> str:
        return f"http://127.0.0.1:{self.port}/{name}"


@pytest.fixture(scope="session")
def local_server():
    """Serve tests/fixtures/html for the whole session."""
    with LocalHTTPServer(FIXTURES_DIR) as server:
        yield server
