"""Parser for LLM "responses" API payloads.

The model reply is free-form text, so no structure is extracted from it:
each assistant ``output_text`` fragment becomes one opaque meaning.
"""

from __future__ import annotations

from typing import Any, Optional

from YiDict.backends.http import decode_json
from YiDict.core.errors import PayloadDecodeError, ProviderError
from YiDict.core.models import Translation

COMPLETED_STATUS = "completed"
ASSISTANT_ROLE = "assistant"
OUTPUT_TEXT_TYPE = "output_text"


def extract_output_texts(outputs: Any) -> Optional[list[str]]:
    """Collect assistant ``output_text`` fragments in encounter order.

    Returns:
        None when no assistant item carrying a content list was seen, else
        the (possibly empty) list of text fragments.

    Raises:
        PayloadDecodeError: If an ``output_text`` item carries a non-string text.
    """
    texts: Optional[list[str]] = None
    if not isinstance(outputs, list):
        return texts
    for item in outputs:
        if not isinstance(item, dict) or item.get("role") != ASSISTANT_ROLE:
            continue
        contents = item.get("content")
        if not isinstance(contents, list):
            continue
        if texts is None:
            texts = []
        for content in contents:
            if not isinstance(content, dict) or content.get("type") != OUTPUT_TEXT_TYPE:
                continue
            text = content.get("text")
            if text is None:
                continue
            if not isinstance(text, str):
                raise PayloadDecodeError(f"Unexpected chat response: output_text is {type(text).__name__}, expected a string")
            texts.append(text)
    return texts


def parse_chat_payload(text: str, word: str) -> Translation:
    """Parse a chat backend response into a Translation.

    Args:
        text: Raw JSON body.
        word: The queried word.

    Returns:
        Translation whose meanings are the assistant text fragments.

    Raises:
        PayloadDecodeError: If the body is not a JSON object.
        ProviderError: If the response status is not ``completed``.
    """
    data = decode_json(text, "chat")
    if not isinstance(data, dict):
        raise PayloadDecodeError("Unexpected chat response: expected a JSON object")

    status = data.get("status")
    if status != COMPLETED_STATUS:
        raise ProviderError("chat", f"response status is {status!r}, expected {COMPLETED_STATUS!r}")

    return Translation(word=word, meanings=extract_output_texts(data.get("output")))
