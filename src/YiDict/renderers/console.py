"""Console text output renderers.

Renders a `Translation` into human-friendly text, optionally colored.
"""

from __future__ import annotations

from typing import Optional

import click

from YiDict.core.models import Translation
from YiDict.renderers.base import Emit, OutputWriter


def _paint(text: str, color: Optional[str]) -> str:
    return click.style(text, fg=color) if color else text


def render_phonetics(translation: Translation, *, color: bool = True) -> Optional[str]:
    """Render the phonetic line.

    Both transcriptions are labeled 英/美; a single one is shown unlabeled.

    Returns:
        The line, or None when no transcription is known.
    """
    accent = "green" if color else None
    uk, us = translation.phonetic_uk, translation.phonetic_us
    if uk and us:
        return f"英 /{_paint(uk, accent)}/ 美 /{_paint(us, accent)}/"
    single = us or uk
    if single:
        return f"/{_paint(single, accent)}/"
    return None


def render_text(translation: Translation, *, color: bool = True) -> str:
    """Render a translation into a text block.

    Meanings are printed one per line, prefixed by the part of speech at the
    same index when there is one.

    Args:
        translation: Lookup result.
        color: Whether to add ANSI colors.

    Returns:
        A formatted string ending with a newline.
    """
    lines = [_paint(translation.word, "cyan" if color else None)]

    phonetics = render_phonetics(translation, color=color)
    if phonetics:
        lines.append(phonetics)

    for idx, meaning in enumerate(translation.meanings or ()):
        pos = translation.pos_at(idx)
        body = _paint(meaning, "green" if color else None)
        lines.append(f"{pos} {body}" if pos else body)

    return "\n".join(lines) + "\n"


class TextOutputWriter(OutputWriter):
    """Write results as text to stdout."""

    def __init__(self, *, color: bool = True, emit: Emit | None = None) -> None:
        super().__init__(emit)
        self.color = color

    def write(self, translation: Translation) -> None:
        self.emit(render_text(translation, color=self.color).rstrip("\n"))
