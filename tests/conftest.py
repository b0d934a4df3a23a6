"""
Pytest configuration and fixtures
"""

import threading
from typing import Dict, List, Optional, Tuple

import pytest

from theo_sdk.auth import Credential
from theo_sdk.http.adapter import AsyncHTTPAdapter, HTTPAdapter
from theo_sdk.models import OutgoingRequest, ResponseMetadata
from theo_sdk.session import Session

NODE_URL = "http://localhost:7474/db/data/node/1"


class DummyAdapter(HTTPAdapter):
    """Mock HTTP adapter for testing."""

    def __init__(self, status: int = 200, body: Optional[bytes] = b"ok", error: Exception = None):
        self.requests: List[Dict] = []
        self.response_status = status
        self.response_body = body
        self.response_headers = {"Content-Type": "application/json"}
        self.error = error
        self.closed = False
        self._lock = threading.Lock()

    @property
    def last_request(self) -> Optional[Dict]:
        return self.requests[-1] if self.requests else None

    def send(
        self,
        request: OutgoingRequest,
        headers: Dict[str, str],
        auth: Optional[Credential] = None,
        timeout: Tuple[float, float] = (1.0, 10.0),
    ):
        """Mock send method."""
        with self._lock:
            self.requests.append(
                {"request": request, "headers": headers, "auth": auth, "timeout": timeout}
            )
        if self.error is not None:
            raise self.error
        metadata = ResponseMetadata(
            status_code=self.response_status,
            url=request.url,
            headers=self.response_headers,
        )
        return metadata, self.response_body

    def close(self) -> None:
        self.closed = True


class DummyAsyncAdapter(AsyncHTTPAdapter):
    """Mock async HTTP adapter for testing."""

    def __init__(self, status: int = 200, body: Optional[bytes] = b"ok", error: Exception = None):
        self.sync = DummyAdapter(status=status, body=body, error=error)

    @property
    def requests(self) -> List[Dict]:
        return self.sync.requests

    async def send(self, request, headers, auth=None, timeout=(1.0, 10.0)):
        return self.sync.send(request, headers, auth=auth, timeout=timeout)

    async def close(self) -> None:
        self.sync.closed = True


class Recorder:
    """Collects callback invocations."""

    def __init__(self):
        self.successes = []
        self.errors = []
        self.threads = []

    def on_success(self, data, response):
        self.threads.append(threading.current_thread().name)
        self.successes.append((data, response))

    def on_error(self, error, response):
        self.threads.append(threading.current_thread().name)
        self.errors.append((error, response))


@pytest.fixture
def adapter():
    return DummyAdapter()


@pytest.fixture
def session(adapter):
    s = Session(adapter=adapter)
    yield s
    s.close()


@pytest.fixture
def recorder():
    return Recorder()
