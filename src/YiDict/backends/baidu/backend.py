"""Baidu machine translation backend."""

from __future__ import annotations

import hashlib
import random
from collections.abc import Callable
from dataclasses import dataclass

import requests

from YiDict.backends.baidu.parser import parse_baidu_payload
from YiDict.backends.http import send_request
from YiDict.config.backend import DEFAULT_TIMEOUT
from YiDict.core.models import Translation
from YiDict.utils.log import log

BAIDU_URL = "https://fanyi-api.baidu.com/api/trans/vip/translate"
SOURCE_LANG = "auto"
TARGET_LANG = "zh"


def random_salt() -> int:
    """Return a random unsigned 32-bit salt."""
    return random.getrandbits(32)


def make_sign(appid: str, word: str, salt: str, secret_key: str) -> str:
    """Compute the request signature Baidu expects.

    The digest input is ``appid + word + salt + secret_key`` with no
    separators. MD5 is mandated by the provider protocol.
    """
    return hashlib.md5(f"{appid}{word}{salt}{secret_key}".encode("utf-8")).hexdigest()


@dataclass(slots=True)
class BaiduTranslator:
    """Baidu-backed translator using a signed form request.

    Attributes:
        word: Text to translate.
        session: Shared HTTP session.
        appid: Baidu application id.
        secret_key: Baidu shared secret.
        timeout: Request timeout in seconds.
        salt_source: Callable producing the per-request salt.
    """

    word: str
    session: requests.Session
    appid: str
    secret_key: str
    timeout: float = DEFAULT_TIMEOUT
    salt_source: Callable[[], int] = random_salt
    name: str = "baidu"

    def build_form(self) -> dict[str, str]:
        """Build the signed form fields for one request."""
        salt = str(self.salt_source())
        return {
            "q": self.word,
            "from": SOURCE_LANG,
            "to": TARGET_LANG,
            "appid": self.appid,
            "salt": salt,
            "sign": make_sign(self.appid, self.word, salt, self.secret_key),
        }

    def translate(self) -> Translation:
        """Translate the word into Chinese via Baidu.

        Returns:
            Translation whose meanings are the translated segments.

        Raises:
            TranslationError: On transport, status, decode or provider failures.
        """
        if not self.appid or not self.secret_key:
            log.warning("Baidu credentials are empty; the request will likely be rejected")
        response = send_request(
            self.session,
            "POST",
            BAIDU_URL,
            timeout=self.timeout,
            provider=self.name,
            data=self.build_form(),
        )
        response.encoding = "utf-8"
        return parse_baidu_payload(response.text, self.word)
