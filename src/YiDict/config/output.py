"""Output and speech domain configuration."""

from __future__ import annotations

import shlex
from dataclasses import dataclass
from typing import Any, Mapping

from YiDict.config.common import check_non_empty, expect_str, get_section, get_value

_ALLOWED_FORMATS = {"text", "pure", "json"}

DEFAULT_PLAYER = "ffplay -nodisp -autoexit -loglevel quiet"


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """Output configuration.

    Attributes:
        format: ``text`` (colored), ``pure`` (no color) or ``json``.
    """

    format: str = "text"


@dataclass(frozen=True, slots=True)
class SpeechConfig:
    """Speech playback configuration.

    Attributes:
        player: External command used to play an audio file; the file path is
            appended as the last argument.
    """

    player: str = DEFAULT_PLAYER

    @property
    def player_argv(self) -> list[str]:
        """Return the player command split into argv form."""
        return shlex.split(self.player)


def load_output(raw: Mapping[str, Any]) -> OutputConfig:
    """Load the ``output`` section.

    Raises:
        TypeError: If config types are invalid.
    """
    section = get_section(raw, "output")
    return OutputConfig(
        format=expect_str(get_value(section, "format", "text"), "output.format").strip().lower(),
    )


def load_speech(raw: Mapping[str, Any]) -> SpeechConfig:
    """Load the ``speech`` section.

    Raises:
        TypeError: If config types are invalid.
    """
    section = get_section(raw, "speech")
    return SpeechConfig(
        player=expect_str(get_value(section, "player", DEFAULT_PLAYER), "speech.player"),
    )


def check_output(config: OutputConfig) -> None:
    """Validate output domain constraints.

    Raises:
        ValueError: If the format is unknown.
    """
    if config.format not in _ALLOWED_FORMATS:
        raise ValueError(f"output.format must be one of {sorted(_ALLOWED_FORMATS)}")


def check_speech(config: SpeechConfig) -> None:
    """Validate speech domain constraints.

    Raises:
        ValueError: If the player command is empty or cannot be split into argv.
    """
    check_non_empty(config.player, "speech.player")
    try:
        argv = config.player_argv
    except ValueError as e:
        raise ValueError(f"speech.player is not a valid command line: {e}") from e
    if not argv:
        raise ValueError("speech.player must name a command")
