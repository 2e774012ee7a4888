from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest


class RecordingTransport(httpx.MockTransport):
    """MockTransport that answers every request with a fixed JSON body."""

    def __init__(self, body: Any, status_code: int = 200) -> None:
        self.requests: list[httpx.Request] = []
        self.body = body
        self.status_code = status_code
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.body, (bytes, str)):
            return httpx.Response(self.status_code, content=self.body)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last_payload(self) -> dict[str, Any]:
        return json.loads(self.requests[-1].content)


@pytest.fixture()
def make_transport() -> Callable[..., RecordingTransport]:
    return RecordingTransport


@pytest.fixture()
def result_transport() -> RecordingTransport:
    return RecordingTransport({"jsonrpc": "2.0", "id": 1, "result": "0x10"})
