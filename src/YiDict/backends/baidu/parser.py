"""Baidu translate JSON parser.

The response is an untagged union: a success shape (``from``, ``to``,
``trans_result``) or an error shape (``error_code``, ``error_msg``). The
success shape is tried first; a payload matching neither is a decode error.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from YiDict.backends.http import decode_json
from YiDict.core.errors import PayloadDecodeError, ProviderError
from YiDict.core.models import Translation


@dataclass(frozen=True, slots=True)
class BaiduTransUnit:
    src: str
    dst: str


@dataclass(frozen=True, slots=True)
class BaiduSuccess:
    source_lang: str
    target_lang: str
    units: tuple[BaiduTransUnit, ...]


@dataclass(frozen=True, slots=True)
class BaiduFailure:
    code: str
    message: str


def _as_success(data: dict[str, Any]) -> Optional[BaiduSuccess]:
    source_lang = data.get("from")
    target_lang = data.get("to")
    items = data.get("trans_result")
    if not isinstance(source_lang, str) or not isinstance(target_lang, str) or not isinstance(items, list):
        return None
    units: list[BaiduTransUnit] = []
    for item in items:
        if not isinstance(item, dict):
            return None
        src, dst = item.get("src"), item.get("dst")
        if not isinstance(src, str) or not isinstance(dst, str):
            return None
        units.append(BaiduTransUnit(src=src, dst=dst))
    return BaiduSuccess(source_lang=source_lang, target_lang=target_lang, units=tuple(units))


def _as_failure(data: dict[str, Any]) -> Optional[BaiduFailure]:
    code = data.get("error_code")
    message = data.get("error_msg")
    # Baidu sends the code as a string, but older docs show integers.
    if isinstance(code, bool) or not isinstance(code, (str, int)) or not isinstance(message, str):
        return None
    return BaiduFailure(code=str(code), message=message)


def parse_baidu_response(text: str) -> BaiduSuccess | BaiduFailure:
    """Decode a Baidu payload into one of its two shapes.

    Raises:
        PayloadDecodeError: If the body is not JSON or matches neither shape.
    """
    data = decode_json(text, "baidu")
    if isinstance(data, dict):
        parsed = _as_success(data) or _as_failure(data)
        if parsed is not None:
            return parsed
    raise PayloadDecodeError("Unexpected baidu response: neither success nor error shape")


def parse_baidu_payload(text: str, word: str) -> Translation:
    """Parse a Baidu response into a Translation.

    Only the translated ``dst`` values are kept, in payload order.

    Raises:
        PayloadDecodeError: If the payload cannot be decoded.
        ProviderError: If Baidu returned its error shape.
    """
    parsed = parse_baidu_response(text)
    if isinstance(parsed, BaiduFailure):
        raise ProviderError("baidu", parsed.message, code=parsed.code)
    return Translation(word=word, meanings=[unit.dst for unit in parsed.units])
