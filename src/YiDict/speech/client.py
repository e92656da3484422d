"""Pronunciation audio client."""

from __future__ import annotations

from enum import IntEnum

import requests

from YiDict.backends.http import send_request
from YiDict.config.backend import DEFAULT_TIMEOUT
from YiDict.core.errors import SpeechError, TranslationError

VOICE_URL = "https://dict.youdao.com/dictvoice"


class Accent(IntEnum):
    """Accent codes understood by the voice endpoint."""

    UK = 1
    US = 2

    @property
    def label(self) -> str:
        return "英音" if self is Accent.UK else "美音"


class SpeechClient:
    """Fetch raw pronunciation audio for a word.

    Shares the process-wide HTTP session with the translation backends.
    """

    def __init__(self, session: requests.Session, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._session = session
        self.timeout = timeout

    def fetch_audio(self, word: str, accent: Accent) -> bytes:
        """Download the audio clip for ``word`` in the given accent.

        Args:
            word: Word to pronounce.
            accent: US or UK accent.

        Returns:
            Raw audio bytes (MP3 as served by the endpoint).

        Raises:
            SpeechError: On transport or status failures, or an empty body.
        """
        try:
            response = send_request(
                self._session,
                "GET",
                VOICE_URL,
                timeout=self.timeout,
                provider="speech",
                params={"audio": word, "type": int(accent)},
            )
        except TranslationError as error:
            raise SpeechError(f"{accent.label} audio fetch failed: {error}") from error
        if not response.content:
            raise SpeechError(f"{accent.label} audio is empty")
        return response.content
