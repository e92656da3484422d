"""Command implementations for YiDict CLI.

Encapsulates the lookup flow, separated from CLI parameter handling and
resource management.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import click

from YiDict.backends.base import Translator
from YiDict.core.errors import SpeechError
from YiDict.renderers import OutputWriter
from YiDict.speech import Accent, Speaker
from YiDict.utils.log import log


@dataclass(slots=True)
class LookupCommand:
    """Translate one word, render it, then optionally pronounce it.

    Translation failures propagate and nothing is rendered. Speech failures
    are logged per accent and never affect the rendered output.
    """

    translator: Translator
    output_writer: OutputWriter
    speaker: Optional[Speaker] = None
    accents: tuple[Accent, ...] = ()

    def execute(self) -> list[Accent]:
        """Run the lookup.

        Returns:
            Accents whose playback failed (empty when all succeeded).

        Raises:
            TranslationError: If the backend lookup fails.
        """
        log.debug("Translating with backend=%s", self.translator.name)
        translation = self.translator.translate()
        self.output_writer.write(translation)

        failed: list[Accent] = []
        if self.speaker is None:
            return failed
        for accent in self.accents:
            click.echo(f"{accent.label}朗读...", err=True)
            try:
                self.speaker.speak(translation.word, accent)
            except SpeechError as error:
                log.error("Speak failed: %s", error)
                failed.append(accent)
        return failed
