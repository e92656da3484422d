"""Output renderers for lookup results.

Provides the OutputWriter abstraction, text and JSON implementations, and a
factory to instantiate the writer selected by configuration.
"""

from __future__ import annotations

from YiDict.config import AppConfig
from YiDict.renderers.base import OutputWriter
from YiDict.renderers.console import TextOutputWriter, render_text
from YiDict.renderers.json import JsonOutputWriter, dumps_translation, load_translation, render_json


def create_output_writer(config: AppConfig) -> OutputWriter:
    """Create output writer based on config.

    Args:
        config: Application configuration.

    Returns:
        Writer for ``output.format``.
    """
    if config.output.format == "json":
        return JsonOutputWriter()
    return TextOutputWriter(color=config.output.format != "pure")


__all__ = [
    "OutputWriter",
    "TextOutputWriter",
    "JsonOutputWriter",
    "create_output_writer",
    "dumps_translation",
    "load_translation",
    "render_json",
    "render_text",
]
