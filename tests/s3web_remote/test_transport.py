"""Tests for HttpTransport."""

import httpx

from s3web_remote.config import HttpSettings
from s3web_remote.transport import HttpTransport


class TestClientConfiguration:
    def test_settings_applied(self):
        with HttpTransport(settings=HttpSettings(timeout_seconds=5, follow_redirects=False)) as transport:
            assert transport._client.timeout.read == 5
            assert transport._client.follow_redirects is False
            assert transport._client.headers["User-Agent"] == "s3web-remote"

    def test_no_timeout_by_default(self):
        with HttpTransport(settings=HttpSettings()) as transport:
            assert transport._client.timeout.read is None


class TestGet:
    def test_yields_streaming_response(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.method)
            return httpx.Response(200, content=b"body")

        client = httpx.Client(transport=httpx.MockTransport(handler))
        with HttpTransport(settings=HttpSettings(), client=client) as transport:
            with transport.get("http://host/file") as response:
                assert response.status_code == 200
                assert response.read() == b"body"

        assert seen == ["GET"]
