"""Baidu signed JSON translation backend."""

from YiDict.backends.baidu.backend import BaiduTranslator, make_sign
from YiDict.backends.baidu.parser import parse_baidu_payload, parse_baidu_response

__all__ = ["BaiduTranslator", "make_sign", "parse_baidu_payload", "parse_baidu_response"]
