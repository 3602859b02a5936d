from __future__ import annotations

import json
from typing import Any, Callable

import pytest

from pinpoint_mcp.client import PinpointClient
from pinpoint_mcp.config import PinpointConfig


class FakeResponse:
    def __init__(
        self,
        status: int = 200,
        payload: Any = None,
        body: bytes | None = None,
        reason: str = "OK",
    ) -> None:
        self.status = status
        self.reason = reason
        self._payload = payload
        self._body = body

    async def json(self, content_type: str | None = "application/json") -> Any:
        return self._payload

    async def text(self) -> str:
        if self._body is not None:
            return self._body.decode("utf-8", errors="replace")
        if self._payload is None:
            return ""
        return json.dumps(self._payload)

    async def read(self) -> bytes:
        return self._body or b""

    async def __aenter__(self) -> "FakeResponse":
        return self

    async def __aexit__(self, *exc_info: Any) -> bool:
        return False


class FakeSession:
    """Stands in for aiohttp.ClientSession and records every call."""

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []
        self.closed = False
        self._routes: dict[tuple[str, str], Callable[[], FakeResponse]] = {}

    def add(self, method: str, url: str, response: FakeResponse | Exception) -> None:
        def respond() -> FakeResponse:
            if isinstance(response, Exception):
                raise response
            return response

        self._routes[(method, url)] = respond

    def request(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"method": method, "url": url, **kwargs})
        try:
            respond = self._routes[(method, url)]
        except KeyError:
            raise AssertionError(f"Unexpected request: {method} {url}") from None
        return respond()

    def get(self, url: str, **kwargs: Any) -> FakeResponse:
        return self.request("GET", url, **kwargs)

    async def close(self) -> None:
        self.closed = True


BASE_URL = "https://acme.pinpointhq.com/api/v1"


@pytest.fixture()
def config() -> PinpointConfig:
    return PinpointConfig(api_key="secret-key", subdomain="acme")


@pytest.fixture()
def fake_session() -> FakeSession:
    return FakeSession()


@pytest.fixture()
def client(config: PinpointConfig, fake_session: FakeSession) -> PinpointClient:
    return PinpointClient(config, session=fake_session)  # type: ignore[arg-type]
