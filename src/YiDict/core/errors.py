"""Error taxonomy for translation and speech lookups."""

from __future__ import annotations

from typing import Optional


class YiDictError(RuntimeError):
    """Base class for all YiDict failures."""


class TranslationError(YiDictError):
    """Raised when the translate step of a lookup fails."""


class NetworkError(TranslationError):
    """Raised when a request fails at the transport level."""


class RequestTimeoutError(NetworkError):
    """Raised when a request exceeds the configured timeout."""


class HttpStatusError(TranslationError):
    """Raised when a provider answers with a non-success HTTP status."""

    def __init__(self, status_code: int, url: str = "") -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(f"HTTP status {status_code}" + (f" from {url}" if url else ""))


class PayloadDecodeError(TranslationError):
    """Raised when a provider payload cannot be decoded.

    Attributes:
        position: ``(line, column)`` reported by the parser, when available.
        offset: Byte offset of the failure in the UTF-8 payload, when available.
    """

    def __init__(
        self,
        message: str,
        *,
        position: Optional[tuple[int, int]] = None,
        offset: Optional[int] = None,
    ) -> None:
        self.position = position
        self.offset = offset
        if offset is not None:
            message = f"{message} (at byte {offset})"
        super().__init__(message)


class ProviderError(TranslationError):
    """Raised when a provider reports an application-level failure."""

    def __init__(self, provider: str, message: str, *, code: Optional[str] = None) -> None:
        self.provider = provider
        self.code = code
        self.message = message
        detail = f"[{code}] {message}" if code else message
        super().__init__(f"{provider} error: {detail}")


class SpeechError(YiDictError):
    """Raised when pronunciation audio cannot be fetched or played."""
