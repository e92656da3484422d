"""Pronunciation speech: fetch audio and play it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from YiDict.speech.client import Accent, SpeechClient
from YiDict.speech.player import AudioPlayer

if TYPE_CHECKING:
    import requests

    from YiDict.config import AppConfig


@dataclass(slots=True)
class Speaker:
    """Fetch and play the pronunciation of a word."""

    client: SpeechClient
    player: AudioPlayer

    def speak(self, word: str, accent: Accent) -> None:
        """Fetch and play one accent variant.

        Raises:
            SpeechError: If fetching or playback fails.
        """
        self.player.play(self.client.fetch_audio(word, accent))


def create_speaker(session: requests.Session, config: AppConfig) -> Speaker:
    """Create a speaker sharing the translation HTTP session.

    Args:
        session: Process-wide HTTP session.
        config: Application configuration.

    Returns:
        Speaker using the configured player command.
    """
    return Speaker(
        client=SpeechClient(session, timeout=config.backend.timeout),
        player=AudioPlayer(config.speech.player_argv),
    )


__all__ = ["Accent", "AudioPlayer", "Speaker", "SpeechClient", "create_speaker"]
