from __future__ import annotations

"""Application config orchestration and YAML loading entrypoints."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from YiDict.config.backend import (
    BackendConfig,
    BaiduConfig,
    ChatConfig,
    check_backend,
    check_chat,
    load_backend,
    load_baidu,
    load_chat,
)
from YiDict.config.output import (
    OutputConfig,
    SpeechConfig,
    check_output,
    check_speech,
    load_output,
    load_speech,
)
from YiDict.config.runtime import RuntimeConfig, check_runtime, load_runtime

DEFAULT_CONFIG_PATH = Path("yi.yml")


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application root configuration."""

    runtime: RuntimeConfig = field(default_factory=RuntimeConfig)
    backend: BackendConfig = field(default_factory=BackendConfig)
    baidu: BaiduConfig = field(default_factory=BaiduConfig)
    chat: ChatConfig = field(default_factory=ChatConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    speech: SpeechConfig = field(default_factory=SpeechConfig)


def parse_config_dict(raw: Mapping[str, Any]) -> AppConfig:
    """Parse a mapping into AppConfig, filling defaults for missing keys."""
    runtime = load_runtime(raw)
    backend = load_backend(raw)
    baidu = load_baidu(raw)
    chat = load_chat(raw)
    output = load_output(raw)
    speech = load_speech(raw)

    check_runtime(runtime)
    check_backend(backend)
    check_chat(chat)
    check_output(output)
    check_speech(speech)

    return AppConfig(
        runtime=runtime,
        backend=backend,
        baidu=baidu,
        chat=chat,
        output=output,
        speech=speech,
    )


def load_config(
    path: Optional[Path] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> AppConfig:
    """Load configuration from an optional YAML file plus CLI overrides.

    When ``path`` is None the default ``yi.yml`` in the working directory is
    used if it exists; otherwise built-in defaults apply. An explicitly given
    path must exist. ``overrides`` is deep-merged over the file content
    before validation.

    Args:
        path: Optional YAML config path.
        overrides: Nested mapping of values taken from CLI flags.

    Returns:
        Validated application config.

    Raises:
        FileNotFoundError: If an explicit config path does not exist.
    """
    raw: dict[str, Any] = {}
    if path is None and DEFAULT_CONFIG_PATH.is_file():
        path = DEFAULT_CONFIG_PATH
    if path is not None:
        raw = parse_yaml(path.read_text(encoding="utf-8"))
    if overrides:
        raw = merge_config_dicts(raw, overrides)
    return parse_config_dict(raw)


def parse_yaml(text: str) -> dict[str, Any]:
    """Parse raw YAML text into a mapping."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, Mapping):
        raise ValueError("Config root must be a mapping/object")
    return dict(data)


def merge_config_dicts(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge two config mappings."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], Mapping) and isinstance(value, Mapping):
            merged[key] = merge_config_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
