"""Shared test fixtures for the YouAreEll client."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

import pytest

from youareell.client.api import APIClient
from youareell.client.logging_config import LOGGER_NAME

if TYPE_CHECKING:
    from collections.abc import Iterator

BASE_URL = "http://test.invalid"


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = None, text: str | None = None) -> None:
        self.status_code = status_code
        if text is None:
            text = "" if payload is None else json.dumps(payload)
        self.text = text
        self.content = text.encode()


class FakeSession:
    """Stand-in for ``requests.Session`` that replays queued responses."""

    def __init__(self) -> None:
        self.responses: list[FakeResponse | Exception] = []
        self.requests: list[dict[str, Any]] = []
        self.closed = False

    def queue(self, status_code: int = 200, payload: Any = None, text: str | None = None) -> None:
        self.responses.append(FakeResponse(status_code, payload, text))

    def fail(self, exc: Exception) -> None:
        self.responses.append(exc)

    def request(self, method: str, url: str, data=None, headers=None, timeout=None) -> FakeResponse:
        self.requests.append(
            {"method": method, "url": url, "data": data, "headers": headers or {}, "timeout": timeout}
        )
        if not self.responses:
            raise AssertionError(f"unexpected request: {method} {url}")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def close(self) -> None:
        self.closed = True

    def sent_json(self, index: int = -1) -> Any:
        return json.loads(self.requests[index]["data"])


def message(sequence: str, body: str = "hi", from_id: str = "alice", to_id: str = "") -> dict[str, str]:
    """Build a wire-format message dict."""
    return {
        "sequence": sequence,
        "timestamp": "2026-10-19T12:00:00+00:00",
        "fromid": from_id,
        "toid": to_id,
        "message": body,
    }


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def client(session: FakeSession) -> APIClient:
    return APIClient(BASE_URL, session=session)


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Undo whatever ``configure_logging`` did during a test."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.NOTSET)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
