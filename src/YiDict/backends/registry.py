"""Backend registry and builders for translators."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Optional

from YiDict.utils.log import log

if TYPE_CHECKING:
    import requests

    from YiDict.backends.base import Translator
    from YiDict.config import AppConfig

BackendBuilder = Callable[[str, "requests.Session", "AppConfig"], "Translator"]

FALLBACK_BACKEND = "iciba"


def build_backend(
    backend_name: Optional[str],
    *,
    word: str,
    session: requests.Session,
    config: AppConfig,
) -> Translator:
    """Build a translator for the named backend.

    Unknown or missing names select Iciba, the only backend that needs no
    credentials.

    Args:
        backend_name: Backend identifier, e.g. from ``--backend``.
        word: Word or phrase to translate.
        session: Shared HTTP session.
        config: Application configuration supplying credentials.

    Returns:
        Translator: Initialized backend bound to ``word``.
    """
    registry = _backend_builders()
    key = (backend_name or "").strip().lower()
    builder = registry.get(key)
    if builder is None:
        if key:
            log.debug("Unknown backend %r, falling back to %s", backend_name, FALLBACK_BACKEND)
        builder = registry[FALLBACK_BACKEND]
    return builder(word, session, config)


def supported_backend_names() -> tuple[str, ...]:
    """Return all backend names that can be built by the registry.

    Returns:
        tuple[str, ...]: Backend names in registry order.
    """
    return tuple(_backend_builders().keys())


def _backend_builders() -> dict[str, BackendBuilder]:
    """Return backend builder registry."""
    return {
        "iciba": _build_iciba,
        "baidu": _build_baidu,
        "chat": _build_chat,
        "chatgpt": _build_chat,
    }


def _build_iciba(word: str, session: requests.Session, config: AppConfig) -> Translator:
    """Build Iciba translator."""
    from YiDict.backends.iciba import IcibaTranslator

    return IcibaTranslator(word=word, session=session, timeout=config.backend.timeout)


def _build_baidu(word: str, session: requests.Session, config: AppConfig) -> Translator:
    """Build Baidu translator."""
    from YiDict.backends.baidu import BaiduTranslator

    return BaiduTranslator(
        word=word,
        session=session,
        appid=config.baidu.appid,
        secret_key=config.baidu.secret_key,
        timeout=config.backend.timeout,
    )


def _build_chat(word: str, session: requests.Session, config: AppConfig) -> Translator:
    """Build LLM chat translator."""
    from YiDict.backends.chat import ChatTranslator

    return ChatTranslator(
        word=word,
        session=session,
        api_key=config.chat.api_key,
        model=config.chat.model,
        base_url=config.chat.base_url,
        timeout=config.backend.timeout,
    )
