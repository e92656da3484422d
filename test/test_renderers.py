"""Tests for text and JSON rendering of translations."""

import json
import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from YiDict.config import AppConfig, OutputConfig
from YiDict.core.models import Translation
from YiDict.renderers import (
    JsonOutputWriter,
    TextOutputWriter,
    create_output_writer,
    dumps_translation,
    load_translation,
    render_json,
    render_text,
)


HELLO = Translation(
    word="hello",
    phonetic_uk="hə'ləʊ",
    phonetic_us="hə'loʊ",
    pos=["int."],
    meanings=["你好"],
)


class TestRenderText(unittest.TestCase):
    def test_both_phonetics_and_pos_pairing(self) -> None:
        text = render_text(HELLO, color=False)
        self.assertEqual(text, "hello\n英 /hə'ləʊ/ 美 /hə'loʊ/\nint. 你好\n")

    def test_single_phonetic_is_unlabeled(self) -> None:
        for translation in (
            Translation(word="word", phonetic_us="wɜːd"),
            Translation(word="word", phonetic_uk="wɜːd"),
        ):
            with self.subTest(translation=translation):
                lines = render_text(translation, color=False).splitlines()
                self.assertEqual(lines, ["word", "/wɜːd/"])

    def test_no_phonetics_no_line(self) -> None:
        text = render_text(Translation(word="苹果", meanings=["apple"]), color=False)
        self.assertEqual(text, "苹果\napple\n")

    def test_short_pos_leaves_extra_meanings_unlabeled(self) -> None:
        translation = Translation(word="run", pos=["v."], meanings=["跑", "运行"])
        lines = render_text(translation, color=False).splitlines()
        self.assertEqual(lines, ["run", "v. 跑", "运行"])

    def test_color_mode_adds_ansi_codes(self) -> None:
        text = render_text(HELLO, color=True)
        self.assertIn("\x1b[", text)
        self.assertIn("你好", text)
        self.assertIn("int. ", text)

    def test_text_writer_emits_block(self) -> None:
        out: list[str] = []
        TextOutputWriter(color=False, emit=out.append).write(HELLO)
        self.assertEqual(out, ["hello\n英 /hə'ləʊ/ 美 /hə'loʊ/\nint. 你好"])


class TestRenderJson(unittest.TestCase):
    def test_all_fields_present_with_nulls(self) -> None:
        data = render_json(Translation(word="apple", meanings=["苹果"]))
        self.assertEqual(
            data,
            {
                "word": "apple",
                "phonetic_us": None,
                "phonetic_uk": None,
                "audio_us": None,
                "audio_uk": None,
                "pos": None,
                "meanings": ["苹果"],
                "desc": None,
            },
        )

    def test_round_trip_is_field_for_field_equal(self) -> None:
        for translation in (HELLO, Translation(word="x"), Translation(word="y", pos=[], meanings=[])):
            with self.subTest(translation=translation):
                self.assertEqual(load_translation(dumps_translation(translation)), translation)

    def test_dumps_is_single_line_utf8(self) -> None:
        text = dumps_translation(HELLO)
        self.assertNotIn("\n", text)
        self.assertIn("你好", text)
        self.assertEqual(json.loads(text)["pos"], ["int."])

    def test_load_rejects_bad_payloads(self) -> None:
        for payload in ("[]", '{"meanings": []}', '{"word": "a", "pos": "n."}', '{"word": "a", "desc": 1}'):
            with self.subTest(payload=payload):
                with self.assertRaises(ValueError):
                    load_translation(payload)

    def test_json_writer_emits_one_line(self) -> None:
        out: list[str] = []
        JsonOutputWriter(emit=out.append).write(HELLO)
        self.assertEqual(len(out), 1)
        self.assertEqual(load_translation(out[0]), HELLO)


class TestCreateOutputWriter(unittest.TestCase):
    def test_format_selection(self) -> None:
        self.assertIsInstance(create_output_writer(AppConfig(output=OutputConfig(format="json"))), JsonOutputWriter)
        text_writer = create_output_writer(AppConfig(output=OutputConfig(format="text")))
        pure_writer = create_output_writer(AppConfig(output=OutputConfig(format="pure")))
        self.assertTrue(text_writer.color)
        self.assertFalse(pure_writer.color)


class TestTranslationModel(unittest.TestCase):
    def test_sequences_become_tuples(self) -> None:
        self.assertEqual(HELLO.pos, ("int.",))
        self.assertEqual(HELLO.meanings, ("你好",))

    def test_fields_are_read_only(self) -> None:
        with self.assertRaises(AttributeError):
            HELLO.word = "bye"  # type: ignore[misc]

    def test_pos_at(self) -> None:
        self.assertEqual(HELLO.pos_at(0), "int.")
        self.assertIsNone(HELLO.pos_at(1))
        self.assertIsNone(Translation(word="x", meanings=["a"]).pos_at(0))


if __name__ == "__main__":
    unittest.main()
