# backend/app/relay_client.py
import abc
import json
import logging
from functools import lru_cache
from typing import Any, Optional, Tuple

import requests

from .config import Settings
from .exceptions import RelayError
from .services import forward_prompt

logger = logging.getLogger(__name__)

UNKNOWN_RELAY_ERROR = "An unknown error occurred with the backend server."
NO_CANDIDATE_TEXT = "The generative API returned no candidate text."


def error_message_from_body(body: Any) -> str:
    """Pull a readable message out of a relay error body.

    Relay errors are `{"error": "..."}`; errors forwarded from Gemini are
    `{"error": {"code": ..., "message": ...}}`.
    """
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, str) and error:
            return error
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
    return UNKNOWN_RELAY_ERROR


def extract_generated_text(body: Any) -> str:
    """Text of the first content part of the first candidate."""
    try:
        return body["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError) as e:
        raise RelayError(NO_CANDIDATE_TEXT) from e


class RelayClient(abc.ABC):
    """Client side of the relay: send a prompt, get generated text back.

    In structured mode the generated text is parsed as JSON; a parse failure
    propagates to the caller.
    """

    @abc.abstractmethod
    def _post(self, prompt: str, is_json: bool) -> Tuple[int, Any]:
        ...

    def generate(self, prompt: str, is_json: bool = False) -> Any:
        status_code, body = self._post(prompt, is_json)
        if not 200 <= status_code < 300:
            raise RelayError(error_message_from_body(body), status_code=status_code)
        text = extract_generated_text(body)
        return json.loads(text) if is_json else text


class HttpRelayClient(RelayClient):
    """Talks to a relay deployed elsewhere."""

    def __init__(self, url: str, session: Optional[requests.Session] = None):
        self.url = url
        self.session = session or requests.Session()

    def _post(self, prompt: str, is_json: bool) -> Tuple[int, Any]:
        response = self.session.post(self.url, json={"prompt": prompt, "isJson": is_json})
        try:
            body = response.json()
        except ValueError:
            logger.warning("Relay at %s returned a non-JSON body (status=%s)", self.url, response.status_code)
            body = None
        return response.status_code, body


class InProcessRelayClient(RelayClient):
    """Calls the relay forwarding function directly, skipping the HTTP hop."""

    def __init__(self, settings: Settings):
        self.settings = settings

    def _post(self, prompt: str, is_json: bool) -> Tuple[int, Any]:
        return forward_prompt(prompt, is_json, self.settings)


@lru_cache
def http_relay_client(url: str) -> HttpRelayClient:
    """One client, and one pooled requests.Session, per relay URL."""
    return HttpRelayClient(url)


def relay_client_for(settings: Settings) -> RelayClient:
    if settings.relay_url:
        return http_relay_client(settings.relay_url)
    return InProcessRelayClient(settings)
