"""Click CLI interface definitions.

Defines the ``yi`` command and routes it to the command runner.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import click
from dotenv import load_dotenv

from YiDict.cli.runner import CommandRunner
from YiDict.config import load_config
from YiDict.speech import Accent


def _read_word(word: Optional[str]) -> str:
    """Return the word argument, or all of stdin when it is missing."""
    if word is None:
        word = click.get_text_stream("stdin").read()
    word = word.strip()
    if not word:
        raise click.UsageError("No word given (pass it as an argument or on stdin).")
    return word


def _cli_overrides(
    *,
    backend: Optional[str],
    proxy: Optional[str],
    as_json: bool,
    pure: bool,
    verbose: bool,
) -> dict[str, Any]:
    """Translate CLI flags into a nested config override mapping."""
    overrides: dict[str, Any] = {}
    if backend is not None:
        overrides.setdefault("backend", {})["name"] = backend
    if proxy is not None:
        overrides.setdefault("backend", {})["proxy"] = proxy
    if as_json:
        overrides["output"] = {"format": "json"}
    elif pure:
        overrides["output"] = {"format": "pure"}
    if verbose:
        overrides["log"] = {"level": "DEBUG"}
    return overrides


@click.command(help="yi: a fast and simple command-line translation tool.")
@click.argument("word", required=False)
@click.option(
    "-b",
    "--backend",
    default=None,
    help='Translation backend: "iciba" (default), "baidu" or "chat". '
    "Baidu reads BAIDU_TRANS_APPID/BAIDU_TRANS_KEY, chat reads OPENAI_API_KEY.",
)
@click.option("--speak-us", is_flag=True, help="美音朗读 (play US pronunciation).")
@click.option("--speak-uk", is_flag=True, help="英音朗读 (play UK pronunciation).")
@click.option("--json", "as_json", is_flag=True, help="以JSON格式输出 (print JSON).")
@click.option("--pure", is_flag=True, help="以无格式纯文本输出 (print plain text).")
@click.option("--proxy", default=None, help="Proxy URL for all outbound requests.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False, exists=True),
    default=None,
    help="Path to YAML config file (default: ./yi.yml if present).",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.version_option(package_name="yi-dict")
def cli(
    word: Optional[str],
    backend: Optional[str],
    speak_us: bool,
    speak_uk: bool,
    as_json: bool,
    pure: bool,
    proxy: Optional[str],
    config_path: Optional[Path],
    verbose: bool,
) -> None:
    """Translate WORD (or stdin) and print the result.

    Loads environment variables from .env file before processing config.
    """
    load_dotenv()

    overrides = _cli_overrides(backend=backend, proxy=proxy, as_json=as_json, pure=pure, verbose=verbose)
    try:
        cfg = load_config(config_path, overrides)
    except (TypeError, ValueError) as e:
        raise click.ClickException(f"Invalid config: {e}") from e

    accents: list[Accent] = []
    if speak_us:
        accents.append(Accent.US)
    if speak_uk:
        accents.append(Accent.UK)

    runner = CommandRunner(cfg)
    runner.run_lookup(_read_word(word), accents)
