"""HTTP API client for interacting with the YouAreEll server."""
import json
import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests
from pydantic import BaseModel, TypeAdapter, ValidationError

from ..shared.schemas import Message, User
from .config import DEFAULT_BASE_URL, REQUEST_TIMEOUT
from .errors import DecodeError, EncodeError, HTTPStatusError, TransportError

logger = logging.getLogger(__name__)


def _segment(value: str) -> str:
    return quote(value, safe="")


def feed_path(github_id: Optional[str] = None) -> str:
    """Return the message endpoint for the global feed or one identity's feed."""
    if github_id:
        return f"/ids/{_segment(github_id)}/messages"
    return "/messages"


class APIClient:
    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        session: Optional[requests.Session] = None,
        timeout: float = REQUEST_TIMEOUT,
    ):
        self.base_url = base_url.rstrip("/")
        self._owns_session = session is None
        self.session = session or requests.Session()
        self.timeout = timeout

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "APIClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _encode(self, body: Any) -> bytes:
        try:
            if isinstance(body, BaseModel):
                return body.model_dump_json(by_alias=True, exclude_none=True).encode()
            return json.dumps(body).encode()
        except (TypeError, ValueError) as exc:
            raise EncodeError(f"could not encode request body: {exc}") from exc

    def call(self, method: str, path: str, body: Any = None, response_type: Any = None) -> Any:
        """Send one request and decode the response into ``response_type``.

        A status outside 200-299 raises HTTPStatusError; the raw body is only
        written to the verbose trace. With no ``response_type`` the body is
        ignored and None is returned.
        """
        url = f"{self.base_url}{path}"
        logger.debug("[%s %s]", method, url)

        headers: Dict[str, str] = {}
        data = None
        if body is not None:
            data = self._encode(body)
            headers["Content-Type"] = "application/json"
            logger.debug("[Body: %s]", data.decode())
        if response_type is not None:
            headers["Accept"] = "application/json"

        try:
            resp = self.session.request(method, url, data=data, headers=headers, timeout=self.timeout)
        except requests.RequestException as exc:
            raise TransportError(str(exc)) from exc

        logger.debug("[Status: %d]", resp.status_code)
        logger.debug("[Output: %s]", resp.text)

        if not 200 <= resp.status_code <= 299:
            raise HTTPStatusError(resp.status_code, resp.text)
        if response_type is None:
            return None
        try:
            return TypeAdapter(response_type).validate_json(resp.content)
        except ValidationError as exc:
            raise DecodeError(f"could not decode response from {path}: {exc}") from exc

    def list_users(self) -> List[User]:
        return self.call("GET", "/ids", response_type=List[User])

    def get_user_id(self, github_id: str) -> str:
        return self.call("GET", f"/ids/{_segment(github_id)}", response_type=str)

    def register(self, name: str, github_id: str) -> None:
        payload = User(user_id="-", name=name, github_id=github_id)
        self.call("POST", "/ids", body=payload)

    def list_messages(self, github_id: Optional[str] = None) -> List[Message]:
        return self.call("GET", feed_path(github_id), response_type=List[Message])

    def send_message(self, message: Message) -> Message:
        return self.call("POST", feed_path(message.from_id), body=message, response_type=Message)
