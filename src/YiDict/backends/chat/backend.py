"""LLM chat backend using an OpenAI-compatible responses endpoint."""

from __future__ import annotations

from dataclasses import dataclass

import requests

from YiDict.backends.chat.parser import parse_chat_payload
from YiDict.backends.chat.prompt import build_input
from YiDict.backends.http import send_request
from YiDict.config.backend import DEFAULT_TIMEOUT
from YiDict.core.models import Translation
from YiDict.utils.log import log

DEFAULT_BASE_URL = "https://api.openai.com"
DEFAULT_MODEL = "gpt-4o-mini"


def normalize_endpoint(base_url: str) -> str:
    """Normalize base URL to the full responses endpoint.

    Supports three input formats:
    1. https://api.xxx.com -> https://api.xxx.com/v1/responses
    2. https://api.xxx.com/v1 -> https://api.xxx.com/v1/responses
    3. https://api.xxx.com/v1/responses -> (unchanged)

    Raises:
        ValueError: If base_url is empty.
    """
    if not base_url:
        raise ValueError("base_url cannot be empty")

    url = base_url.rstrip("/")

    if url.endswith("/responses"):
        return url
    if url.endswith("/v1"):
        return url + "/responses"
    return url + "/v1/responses"


@dataclass(slots=True)
class ChatTranslator:
    """Translator asking an LLM to act as a bilingual dictionary.

    The reply is kept as opaque text; no parts of speech are extracted.
    """

    word: str
    session: requests.Session
    api_key: str
    model: str = DEFAULT_MODEL
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    name: str = "chat"

    def translate(self) -> Translation:
        """Ask the model for a dictionary entry of the word.

        Raises:
            TranslationError: On transport, status, decode or provider failures.
        """
        if not self.api_key:
            log.warning("Chat API key is empty; the request will likely be rejected")
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        payload = {
            "model": self.model,
            "input": build_input(self.word),
        }
        log.debug("chat request: model=%s", self.model)
        response = send_request(
            self.session,
            "POST",
            normalize_endpoint(self.base_url),
            timeout=self.timeout,
            provider=self.name,
            json=payload,
            headers=headers,
        )
        response.encoding = "utf-8"
        return parse_chat_payload(response.text, self.word)
