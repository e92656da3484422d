"""Tests for the Iciba XML parser and backend."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from _fakes import FakeSession, make_response
from YiDict.backends.iciba import IcibaTranslator, assign_phonetics, parse_iciba_xml
from YiDict.backends.iciba.backend import ICIBA_KEY, ICIBA_URL
from YiDict.core.errors import HttpStatusError, PayloadDecodeError


HELLO_XML = """<?xml version="1.0" encoding="UTF-8"?>
<dict num="219" id="219" name="219">
<key>hello</key>
<ps>həˈləʊ</ps>
<pron>http://res-tts.iciba.com/uk/hello.mp3</pron>
<ps>heˈloʊ</ps>
<pron>http://res-tts.iciba.com/us/hello.mp3</pron>
<pos>int.</pos>
<acceptation>喂；哈罗；你好，您好；
</acceptation>
<pos>n.</pos>
<acceptation>“喂”的招呼声或问候声；
</acceptation>
<sent>
<orig>Hello, John!</orig>
<trans>你好，约翰！</trans>
</sent>
</dict>
"""


def _xml_with_ps(*values: str) -> str:
    body = "".join(f"<ps>{v}</ps>" for v in values)
    return f"<dict><key>word</key>{body}<pos>n.</pos><acceptation>词</acceptation></dict>"


class TestAssignPhonetics(unittest.TestCase):
    def test_single_value_is_us(self) -> None:
        self.assertEqual(assign_phonetics(["a"]), (None, "a"))

    def test_two_values_are_uk_then_us(self) -> None:
        self.assertEqual(assign_phonetics(["uk", "us"]), ("uk", "us"))

    def test_other_counts_yield_nothing(self) -> None:
        self.assertEqual(assign_phonetics([]), (None, None))
        self.assertEqual(assign_phonetics(["a", "b", "c"]), (None, None))


class TestParseIcibaXml(unittest.TestCase):
    def test_full_document(self) -> None:
        result = parse_iciba_xml(HELLO_XML.encode("utf-8"), "hello")

        self.assertEqual(result.word, "hello")
        self.assertEqual(result.phonetic_uk, "həˈləʊ")
        self.assertEqual(result.phonetic_us, "heˈloʊ")
        self.assertEqual(result.pos, ("int.", "n."))
        self.assertEqual(result.meanings, ("喂；哈罗；你好，您好；", "“喂”的招呼声或问候声；"))
        self.assertIsNone(result.audio_us)
        self.assertIsNone(result.audio_uk)
        self.assertIsNone(result.desc)

    def test_unrecognized_tags_are_ignored(self) -> None:
        result = parse_iciba_xml(HELLO_XML, "hello")
        self.assertNotIn("Hello, John!", result.meanings)
        self.assertNotIn("你好，约翰！", result.meanings)

    def test_one_ps_sets_us_only(self) -> None:
        result = parse_iciba_xml(_xml_with_ps("wɜːd"), "word")
        self.assertEqual(result.phonetic_us, "wɜːd")
        self.assertIsNone(result.phonetic_uk)

    def test_two_ps_sets_uk_then_us(self) -> None:
        result = parse_iciba_xml(_xml_with_ps("uk", "us"), "word")
        self.assertEqual(result.phonetic_uk, "uk")
        self.assertEqual(result.phonetic_us, "us")

    def test_zero_or_three_ps_leaves_both_absent(self) -> None:
        for values in ((), ("a", "b", "c")):
            with self.subTest(count=len(values)):
                result = parse_iciba_xml(_xml_with_ps(*values), "word")
                self.assertIsNone(result.phonetic_uk)
                self.assertIsNone(result.phonetic_us)
                self.assertEqual(result.meanings, ("词",))

    def test_text_between_elements_is_dropped(self) -> None:
        xml = "<dict><pos>n.</pos>stray<acceptation>词</acceptation>more</dict>"
        result = parse_iciba_xml(xml, "word")
        self.assertEqual(result.pos, ("n.",))
        self.assertEqual(result.meanings, ("词",))

    def test_unknown_word_gives_empty_lists(self) -> None:
        result = parse_iciba_xml("<dict><key>zzqx</key></dict>", "zzqx")
        self.assertEqual(result.pos, ())
        self.assertEqual(result.meanings, ())

    def test_malformed_xml_reports_position(self) -> None:
        with self.assertRaises(PayloadDecodeError) as ctx:
            parse_iciba_xml(b"<dict><key>hello</dict>", "hello")
        self.assertIsNotNone(ctx.exception.position)
        self.assertIsInstance(ctx.exception.offset, int)
        self.assertIn("byte", str(ctx.exception))

    def test_malformed_xml_offset_counts_utf8_bytes(self) -> None:
        data = "<dict>\n<d>你好你好<x></d>".encode("utf-8")
        with self.assertRaises(PayloadDecodeError) as ctx:
            parse_iciba_xml(data, "hello")

        line, column = ctx.exception.position
        self.assertEqual(line, 2)
        first_line = len("<dict>\n".encode("utf-8"))
        prefix = data[first_line : ctx.exception.offset].decode("utf-8")
        self.assertEqual(len(prefix), column)
        self.assertGreater(ctx.exception.offset - first_line, column)

    def test_empty_body_is_decode_error(self) -> None:
        with self.assertRaises(PayloadDecodeError):
            parse_iciba_xml(b"", "hello")


class TestIcibaTranslator(unittest.TestCase):
    def test_translate_sends_key_and_word(self) -> None:
        session = FakeSession(make_response(HELLO_XML))
        result = IcibaTranslator(word="hello", session=session, timeout=3.0).translate()

        self.assertEqual(result.phonetic_us, "heˈloʊ")
        call = session.calls[0]
        self.assertEqual(call["method"], "GET")
        self.assertEqual(call["url"], ICIBA_URL)
        self.assertEqual(call["params"], {"key": ICIBA_KEY, "w": "hello"})
        self.assertEqual(call["timeout"], 3.0)

    def test_http_error_status_fails(self) -> None:
        session = FakeSession(make_response("oops", status_code=502))
        with self.assertRaises(HttpStatusError) as ctx:
            IcibaTranslator(word="hello", session=session).translate()
        self.assertEqual(ctx.exception.status_code, 502)


if __name__ == "__main__":
    unittest.main()
