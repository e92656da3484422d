from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class Translation:
    """Provider-agnostic translation record.

    This is the unified result every backend must map its response to. It is
    built once per lookup, after the provider payload has been fully parsed,
    and is never modified by renderers or the speech step.

    Attributes:
        word: The original query, always populated.
        phonetic_us: US pronunciation transcription if known.
        phonetic_uk: UK pronunciation transcription if known.
        audio_us: Reserved for a US audio source identifier.
        audio_uk: Reserved for a UK audio source identifier.
        pos: Parts of speech, indexed positionally against ``meanings``.
            May be shorter than ``meanings``; the extra meanings are unlabeled.
        meanings: One entry per sense or per translated sentence.
        desc: Reserved free-form description.
    """

    word: str
    phonetic_us: Optional[str] = None
    phonetic_uk: Optional[str] = None
    audio_us: Optional[str] = None
    audio_uk: Optional[str] = None
    pos: Optional[tuple[str, ...]] = None
    meanings: Optional[tuple[str, ...]] = None
    desc: Optional[str] = None

    def __post_init__(self) -> None:
        # Accept any sequence from parsers, store an immutable tuple.
        if self.pos is not None:
            object.__setattr__(self, "pos", tuple(self.pos))
        if self.meanings is not None:
            object.__setattr__(self, "meanings", tuple(self.meanings))

    def pos_at(self, index: int) -> Optional[str]:
        """Return the part of speech paired with ``meanings[index]``, if any."""
        if self.pos is None or index >= len(self.pos):
            return None
        return self.pos[index]
