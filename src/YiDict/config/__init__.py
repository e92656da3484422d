from __future__ import annotations

"""Public configuration API for YiDict."""

from YiDict.config.app import (
    AppConfig,
    load_config,
    merge_config_dicts,
    parse_config_dict,
)
from YiDict.config.backend import BackendConfig, BaiduConfig, ChatConfig
from YiDict.config.output import OutputConfig, SpeechConfig
from YiDict.config.runtime import RuntimeConfig

__all__ = [
    "RuntimeConfig",
    "BackendConfig",
    "BaiduConfig",
    "ChatConfig",
    "OutputConfig",
    "SpeechConfig",
    "AppConfig",
    "load_config",
    "merge_config_dicts",
    "parse_config_dict",
]
