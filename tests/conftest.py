"""Shared fixtures for the Simple Webserver test suite"""
import asyncio
from typing import List, Optional

import pytest
from fastapi.testclient import TestClient
from starlette.requests import Request

from simple_webserver.config import Settings
from simple_webserver.main import create_app
from simple_webserver.services.kubernetes import PodCreationError, PodLauncher
from simple_webserver.services.storage import Storage, StorageError


class FakeStorage(Storage):
    """In-memory storage returning a fixed result or raising a fixed error"""

    def __init__(self, result: str = "PONG", error: Optional[str] = None, delay: float = 0.0):
        self.result = result
        self.error = error
        self.delay = delay
        self.calls = 0
        self.closed = False

    async def ping(self) -> str:
        self.calls += 1
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error:
            raise StorageError(self.error)
        return self.result

    async def close(self):
        self.closed = True


class FakePodLauncher(PodLauncher):
    def __init__(self, result: str = "simple-webserver-x7k2p", error: Optional[str] = None):
        self.result = result
        self.error = error
        self.calls = 0

    def create_pod(self) -> str:
        self.calls += 1
        if self.error:
            raise PodCreationError(self.error)
        return self.result


def make_request(messages: List[dict], method: str = "POST", path: str = "/payload", headers=None) -> Request:
    """Build a bare Starlette request that replays the given ASGI receive messages."""
    queue = list(messages)

    async def receive():
        if queue:
            return queue.pop(0)
        return {"type": "http.disconnect"}

    scope = {
        "type": "http",
        "method": method,
        "path": path,
        "query_string": b"",
        "headers": headers or [],
    }
    return Request(scope, receive)


@pytest.fixture
def settings():
    return Settings(max_payload_bytes=1024)


@pytest.fixture
def storage():
    return FakeStorage()


@pytest.fixture
def pod_launcher():
    return FakePodLauncher()


@pytest.fixture
def app(settings, storage, pod_launcher):
    return create_app(settings, storage=storage, pod_launcher=pod_launcher)


@pytest.fixture
def client(app):
    return TestClient(app, follow_redirects=False)
