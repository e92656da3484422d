"""Iciba XML dictionary backend."""

from YiDict.backends.iciba.backend import IcibaTranslator
from YiDict.backends.iciba.parser import assign_phonetics, parse_iciba_xml

__all__ = ["IcibaTranslator", "assign_phonetics", "parse_iciba_xml"]
