"""Audio playback through an external player command."""

from __future__ import annotations

import subprocess
import tempfile
from pathlib import Path
from typing import Sequence

from YiDict.core.errors import SpeechError
from YiDict.utils.log import log


class AudioPlayer:
    """Play raw audio bytes synchronously to completion.

    The bytes are written to a temporary file whose path is appended to the
    player command.
    """

    def __init__(self, command: Sequence[str], suffix: str = ".mp3") -> None:
        if not command:
            raise ValueError("player command cannot be empty")
        self.command = list(command)
        self.suffix = suffix

    def play(self, audio: bytes) -> None:
        """Play one clip and wait until the player exits.

        Raises:
            SpeechError: If the clip cannot be written, the player cannot be
                started, or it exits with an error.
        """
        try:
            with tempfile.TemporaryDirectory(prefix="yi-") as tmp:
                path = Path(tmp) / f"voice{self.suffix}"
                path.write_bytes(audio)
                argv = [*self.command, str(path)]
                log.debug("Playing audio: %s", argv)
                subprocess.run(argv, check=True, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
        except subprocess.CalledProcessError as error:
            raise SpeechError(f"audio player exited with status {error.returncode}") from error
        except FileNotFoundError as error:
            raise SpeechError(f"audio player not found: {self.command[0]}") from error
        except OSError as error:
            raise SpeechError(f"audio playback failed: {error}") from error
