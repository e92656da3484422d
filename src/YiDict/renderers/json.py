"""JSON output renderers.

Renders a `Translation` into a JSON-serializable object and reads such
objects back. Absent optional fields are always written as ``null``.
"""

from __future__ import annotations

import json
from typing import Any, Mapping, Optional

from YiDict.core.models import Translation
from YiDict.renderers.base import OutputWriter

_STR_FIELDS = ("phonetic_us", "phonetic_uk", "audio_us", "audio_uk", "desc")
_LIST_FIELDS = ("pos", "meanings")


def render_json(translation: Translation) -> dict[str, Any]:
    """Render a translation into a JSON-serializable dict.

    Args:
        translation: Lookup result.

    Returns:
        Dict with every field present; list fields as lists or None.
    """
    return {
        "word": translation.word,
        "phonetic_us": translation.phonetic_us,
        "phonetic_uk": translation.phonetic_uk,
        "audio_us": translation.audio_us,
        "audio_uk": translation.audio_uk,
        "pos": _to_list(translation.pos),
        "meanings": _to_list(translation.meanings),
        "desc": translation.desc,
    }


def dumps_translation(translation: Translation) -> str:
    """Serialize a translation to a single-line UTF-8 JSON string."""
    return json.dumps(render_json(translation), ensure_ascii=False)


def load_translation(payload: Mapping[str, Any] | str) -> Translation:
    """Rebuild a Translation from its JSON form.

    Args:
        payload: JSON text or an already decoded mapping.

    Returns:
        Translation equal to the one that was rendered.

    Raises:
        ValueError: If the payload does not describe a translation.
    """
    data = json.loads(payload) if isinstance(payload, str) else payload
    if not isinstance(data, Mapping):
        raise ValueError("translation JSON must be an object")
    word = data.get("word")
    if not isinstance(word, str):
        raise ValueError("translation JSON requires a string 'word'")

    fields: dict[str, Any] = {"word": word}
    for name in _STR_FIELDS:
        value = data.get(name)
        if value is not None and not isinstance(value, str):
            raise ValueError(f"translation field {name!r} must be a string or null")
        fields[name] = value
    for name in _LIST_FIELDS:
        value = data.get(name)
        if value is not None and (not isinstance(value, list) or not all(isinstance(v, str) for v in value)):
            raise ValueError(f"translation field {name!r} must be a list of strings or null")
        fields[name] = value
    return Translation(**fields)


def _to_list(values: Optional[tuple[str, ...]]) -> Optional[list[str]]:
    return None if values is None else list(values)


class JsonOutputWriter(OutputWriter):
    """Write results as one JSON object per line."""

    def write(self, translation: Translation) -> None:
        self.emit(dumps_translation(translation))
