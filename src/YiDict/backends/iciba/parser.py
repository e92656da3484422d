"""Iciba dictionary XML parser.

Scans the response with a forward-only pull parser. A small state machine
tracks the currently open recognized tag; text of that tag goes to a
per-tag accumulator and every end event resets the state, so text between
recognized elements is dropped. Output fields are derived only after the
whole document has been consumed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence
from xml.etree.ElementTree import Element, ParseError, XMLPullParser

from YiDict.core.errors import PayloadDecodeError
from YiDict.core.models import Translation

_TRACKED_TAGS = frozenset({"key", "ps", "pron", "pos", "acceptation"})


@dataclass(slots=True)
class _IcibaScan:
    key: str = ""
    ps: list[str] = field(default_factory=list)
    pron: list[str] = field(default_factory=list)
    pos: list[str] = field(default_factory=list)
    acceptation: list[str] = field(default_factory=list)

    def collect(self, tag: str, text: str) -> None:
        if tag == "key":
            self.key = text
        else:
            getattr(self, tag).append(text)


def assign_phonetics(ps_list: Sequence[str]) -> tuple[Optional[str], Optional[str]]:
    """Map collected ``ps`` values to ``(phonetic_uk, phonetic_us)``.

    One value is the US transcription; two values are UK then US. Any other
    count yields neither.
    """
    if len(ps_list) == 1:
        return None, ps_list[0]
    if len(ps_list) == 2:
        return ps_list[0], ps_list[1]
    return None, None


def parse_iciba_xml(payload: bytes | str, word: str) -> Translation:
    """Parse an Iciba dictionary response.

    Args:
        payload: Raw XML body.
        word: The queried word.

    Returns:
        Translation with phonetics, parts of speech and sense definitions.

    Raises:
        PayloadDecodeError: If the XML is malformed.
    """
    data = payload.encode("utf-8") if isinstance(payload, str) else payload
    scan = _IcibaScan()
    current_tag: Optional[str] = None

    try:
        for event, elem in _pull_events(data):
            if event == "start":
                if elem.tag in _TRACKED_TAGS:
                    current_tag = elem.tag
                continue
            if current_tag is not None and elem.tag == current_tag:
                text = (elem.text or "").strip()
                if text:
                    scan.collect(current_tag, text)
            current_tag = None
    except ParseError as error:
        line, column = error.position
        raise PayloadDecodeError(
            f"Malformed Iciba XML: {error}",
            position=(line, column),
            offset=_byte_offset(data, line, column),
        ) from error

    phonetic_uk, phonetic_us = assign_phonetics(scan.ps)
    return Translation(
        word=word,
        phonetic_us=phonetic_us,
        phonetic_uk=phonetic_uk,
        pos=scan.pos,
        meanings=scan.acceptation,
    )


def _pull_events(data: bytes) -> Iterator[tuple[str, Element]]:
    """Yield start/end events in document order.

    Syntax errors found while feeding surface from ``read_events``; errors
    found at end of input (e.g. an unclosed root) surface from ``close``.
    """
    parser = XMLPullParser(events=("start", "end"))
    parser.feed(data)
    yield from parser.read_events()
    parser.close()
    yield from parser.read_events()


def _byte_offset(data: bytes, line: int, column: int) -> int:
    """Convert an expat ``(line, column)`` position into a byte offset.

    Expat counts the column in characters, so the failing line is decoded
    before measuring its prefix.
    """
    offset = 0
    for number, raw_line in enumerate(data.splitlines(keepends=True), start=1):
        if number == line:
            prefix = raw_line.decode("utf-8", "replace")[:column]
            return offset + len(prefix.encode("utf-8"))
        offset += len(raw_line)
    return offset + column
