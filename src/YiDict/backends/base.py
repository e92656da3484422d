"""Translator protocol shared by all backends."""

from __future__ import annotations

from typing import Protocol

from YiDict.core.models import Translation


class Translator(Protocol):
    """Protocol for a translation backend.

    An implementation is a value that already holds the word to translate,
    the shared HTTP session and its provider settings, so the lookup itself
    takes no arguments.
    """

    name: str

    def translate(self) -> Translation:
        """Translate the bound word.

        Returns:
            Normalized translation record.

        Raises:
            TranslationError: If the request, decoding or provider fails.
        """
        raise NotImplementedError
