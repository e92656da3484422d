"""LLM chat backend returning free-form dictionary entries."""

from YiDict.backends.chat.backend import ChatTranslator, normalize_endpoint
from YiDict.backends.chat.parser import extract_output_texts, parse_chat_payload

__all__ = ["ChatTranslator", "extract_output_texts", "normalize_endpoint", "parse_chat_payload"]
