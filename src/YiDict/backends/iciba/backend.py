"""Iciba dictionary backend."""

from __future__ import annotations

from dataclasses import dataclass

import requests

from YiDict.backends.http import send_request
from YiDict.backends.iciba.parser import parse_iciba_xml
from YiDict.config.backend import DEFAULT_TIMEOUT
from YiDict.core.models import Translation
from YiDict.utils.log import log

ICIBA_URL = "https://dict-co.iciba.com/api/dictionary.php"
ICIBA_KEY = "D191EBD014295E913574E1EAF8E06666"


@dataclass(slots=True)
class IcibaTranslator:
    """Iciba-backed translator; needs no user credentials."""

    word: str
    session: requests.Session
    timeout: float = DEFAULT_TIMEOUT
    name: str = "iciba"

    def translate(self) -> Translation:
        """Look up the word in the Iciba dictionary.

        Returns:
            Translation with phonetics, parts of speech and definitions.

        Raises:
            TranslationError: On transport, status or XML failures.
        """
        response = send_request(
            self.session,
            "GET",
            ICIBA_URL,
            timeout=self.timeout,
            provider=self.name,
            params={"key": ICIBA_KEY, "w": self.word},
        )
        translation = parse_iciba_xml(response.content, self.word)
        log.debug("iciba parsed: meanings=%d", len(translation.meanings or ()))
        return translation
