"""Shared fixtures for s3web provider tests."""

from typing import Callable

import httpx
import pytest

from s3web_remote.config import HttpSettings
from s3web_remote.server import S3WebRemoteServer
from s3web_remote.transport import HttpTransport
from s3web_remote.types import RemoteOperation, RemoteOperationType

REMOTE = {"url": "http://host/path"}


class FakeRemote:
    """Serves fixed responses by URL and records every request."""

    def __init__(self):
        self.routes: dict[str, tuple[int, bytes]] = {}
        self.requested: list[str] = []

    def add(self, path: str, status_code: int = 200, content: bytes = b"") -> None:
        self.routes[f"{REMOTE['url']}/{path}"] = (status_code, content)

    def handler(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requested.append(url)
        status_code, content = self.routes.get(url, (404, b""))
        return httpx.Response(status_code, content=content)


@pytest.fixture
def fake_remote() -> FakeRemote:
    return FakeRemote()


@pytest.fixture
def server(fake_remote: FakeRemote) -> S3WebRemoteServer:
    client = httpx.Client(transport=httpx.MockTransport(fake_remote.handler))
    with S3WebRemoteServer(transport=HttpTransport(settings=HttpSettings(), client=client)) as s:
        yield s


@pytest.fixture
def make_operation() -> Callable[..., RemoteOperation]:
    def _make(op_type: RemoteOperationType = RemoteOperationType.PULL, **kwargs) -> RemoteOperation:
        values = {
            "remote": dict(REMOTE),
            "commit_id": "commit",
            "type": op_type,
            "operation_id": "operation",
        }
        values.update(kwargs)
        return RemoteOperation(**values)

    return _make
