"""Tests for the LLM chat backend."""

import json
import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from _fakes import FakeSession, make_response
from YiDict.backends.chat import ChatTranslator, normalize_endpoint, parse_chat_payload
from YiDict.backends.chat.prompt import DICTIONARY_PROMPT
from YiDict.core.errors import HttpStatusError, PayloadDecodeError, ProviderError


def _message(*contents: dict, role: str = "assistant") -> dict:
    return {"id": "msg_1", "type": "message", "role": role, "content": list(contents)}


def _text(text: str, content_type: str = "output_text") -> dict:
    return {"type": content_type, "text": text, "annotations": []}


def _payload(status: str, output: list) -> str:
    return json.dumps({"id": "resp_1", "status": status, "output": output}, ensure_ascii=False)


class TestParseChatPayload(unittest.TestCase):
    def test_completed_collects_assistant_output_text_in_order(self) -> None:
        payload = _payload(
            "completed",
            [
                {"id": "rs_1", "type": "reasoning", "summary": []},
                _message(_text("hello /həˈləʊ/ ~ 你好"), _text("no", content_type="refusal")),
                _message(_text("ignored"), role="user"),
                _message(_text("例句：Hello there.")),
            ],
        )
        result = parse_chat_payload(payload, "hello")

        self.assertEqual(result.meanings, ("hello /həˈləʊ/ ~ 你好", "例句：Hello there."))
        self.assertIsNone(result.pos)
        self.assertIsNone(result.phonetic_us)

    def test_non_completed_status_fails_regardless_of_output(self) -> None:
        for status in ("incomplete", "failed", "in_progress"):
            with self.subTest(status=status):
                with self.assertRaises(ProviderError):
                    parse_chat_payload(_payload(status, [_message(_text("你好"))]), "hello")

    def test_missing_status_fails(self) -> None:
        with self.assertRaises(ProviderError):
            parse_chat_payload(json.dumps({"output": []}), "hello")

    def test_no_assistant_output_leaves_meanings_unset(self) -> None:
        result = parse_chat_payload(_payload("completed", [{"type": "reasoning"}]), "hello")
        self.assertIsNone(result.meanings)

    def test_assistant_without_text_gives_empty_meanings(self) -> None:
        payload = _payload("completed", [_message(_text("no", content_type="refusal"))])
        result = parse_chat_payload(payload, "hello")
        self.assertEqual(result.meanings, ())

    def test_non_string_output_text_is_decode_error(self) -> None:
        content = {"type": "output_text", "text": ["你好"]}
        with self.assertRaises(PayloadDecodeError):
            parse_chat_payload(_payload("completed", [_message(content)]), "hello")

    def test_null_output_text_is_skipped(self) -> None:
        content = {"type": "output_text", "text": None}
        result = parse_chat_payload(_payload("completed", [_message(content, _text("好"))]), "hello")
        self.assertEqual(result.meanings, ("好",))

    def test_malformed_json_is_decode_error(self) -> None:
        with self.assertRaises(PayloadDecodeError):
            parse_chat_payload("{not json", "hello")

    def test_non_object_is_decode_error(self) -> None:
        with self.assertRaises(PayloadDecodeError):
            parse_chat_payload("[]", "hello")


class TestNormalizeEndpoint(unittest.TestCase):
    def test_variants(self) -> None:
        expected = "https://api.openai.com/v1/responses"
        self.assertEqual(normalize_endpoint("https://api.openai.com"), expected)
        self.assertEqual(normalize_endpoint("https://api.openai.com/v1/"), expected)
        self.assertEqual(normalize_endpoint(expected), expected)

    def test_empty_raises(self) -> None:
        with self.assertRaises(ValueError):
            normalize_endpoint("")


class TestChatTranslator(unittest.TestCase):
    def test_translate_sends_prompt_with_bearer_key(self) -> None:
        session = FakeSession(make_response(_payload("completed", [_message(_text("hello ~ 你好"))])))
        translator = ChatTranslator(word="hello", session=session, api_key="sk-test", model="gpt-4o-mini")

        result = translator.translate()

        self.assertEqual(result.meanings, ("hello ~ 你好",))
        call = session.calls[0]
        self.assertEqual(call["method"], "POST")
        self.assertEqual(call["url"], "https://api.openai.com/v1/responses")
        self.assertEqual(call["headers"]["Authorization"], "Bearer sk-test")
        self.assertEqual(call["json"]["model"], "gpt-4o-mini")
        self.assertTrue(call["json"]["input"].startswith(DICTIONARY_PROMPT))
        self.assertTrue(call["json"]["input"].endswith(" hello"))

    def test_translate_http_error(self) -> None:
        session = FakeSession(make_response('{"error": {}}', status_code=401))
        with self.assertRaises(HttpStatusError) as ctx:
            ChatTranslator(word="hello", session=session, api_key="bad").translate()
        self.assertEqual(ctx.exception.status_code, 401)


if __name__ == "__main__":
    unittest.main()
