"""Backend domain configuration: selection, transport and credentials."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from YiDict.config.common import (
    check_non_empty,
    expect_float,
    expect_str,
    get_section,
    get_value,
    read_env,
)

DEFAULT_BACKEND = "iciba"
DEFAULT_TIMEOUT = 10.0
PROXY_ENV = "YI_PROXY"


@dataclass(frozen=True, slots=True)
class BackendConfig:
    """Which backend to query and how to reach it.

    ``name`` is not validated: unknown names select the Iciba backend.
    """

    name: str = DEFAULT_BACKEND
    timeout: float = DEFAULT_TIMEOUT
    proxy: str = ""


@dataclass(frozen=True, slots=True)
class BaiduConfig:
    """Baidu translate credentials, resolved from the environment."""

    appid_env: str = "BAIDU_TRANS_APPID"
    key_env: str = "BAIDU_TRANS_KEY"
    appid: str = ""
    secret_key: str = ""


@dataclass(frozen=True, slots=True)
class ChatConfig:
    """LLM chat backend settings."""

    api_key_env: str = "OPENAI_API_KEY"
    base_url: str = "https://api.openai.com"
    model: str = "gpt-4o-mini"
    api_key: str = ""


def load_backend(raw: Mapping[str, Any]) -> BackendConfig:
    """Load the ``backend`` section.

    An empty ``backend.proxy`` falls back to the ``YI_PROXY`` environment
    variable.

    Raises:
        TypeError: If config types are invalid.
    """
    section = get_section(raw, "backend")
    proxy = expect_str(get_value(section, "proxy", ""), "backend.proxy").strip()
    return BackendConfig(
        name=expect_str(get_value(section, "name", DEFAULT_BACKEND), "backend.name").strip().lower(),
        timeout=expect_float(get_value(section, "timeout", DEFAULT_TIMEOUT), "backend.timeout"),
        proxy=proxy or read_env(PROXY_ENV),
    )


def load_baidu(raw: Mapping[str, Any]) -> BaiduConfig:
    """Load the ``baidu`` section and resolve its credentials.

    Raises:
        TypeError: If config types are invalid.
    """
    section = get_section(raw, "baidu")
    appid_env = expect_str(get_value(section, "appid_env", "BAIDU_TRANS_APPID"), "baidu.appid_env")
    key_env = expect_str(get_value(section, "key_env", "BAIDU_TRANS_KEY"), "baidu.key_env")
    return BaiduConfig(
        appid_env=appid_env,
        key_env=key_env,
        appid=read_env(appid_env),
        secret_key=read_env(key_env),
    )


def load_chat(raw: Mapping[str, Any]) -> ChatConfig:
    """Load the ``chat`` section and resolve its API key.

    Raises:
        TypeError: If config types are invalid.
    """
    section = get_section(raw, "chat")
    api_key_env = expect_str(get_value(section, "api_key_env", "OPENAI_API_KEY"), "chat.api_key_env")
    return ChatConfig(
        api_key_env=api_key_env,
        base_url=expect_str(get_value(section, "base_url", "https://api.openai.com"), "chat.base_url"),
        model=expect_str(get_value(section, "model", "gpt-4o-mini"), "chat.model"),
        api_key=read_env(api_key_env),
    )


def check_backend(config: BackendConfig) -> None:
    """Validate backend transport constraints.

    Raises:
        ValueError: If values violate backend constraints.
    """
    if config.timeout <= 0:
        raise ValueError("backend.timeout must be positive")


def check_chat(config: ChatConfig) -> None:
    """Validate chat backend settings.

    Missing API keys are not rejected here; the provider reports them.

    Raises:
        ValueError: If values violate chat constraints.
    """
    check_non_empty(config.base_url, "chat.base_url")
    check_non_empty(config.model, "chat.model")
