"""Command runner for coordinating CLI execution.

Manages the shared HTTP session, logging configuration, component creation
and error handling for the lookup command.
"""

from __future__ import annotations

from typing import Sequence

import click

from YiDict.backends import build_backend, create_session
from YiDict.cli.commands import LookupCommand
from YiDict.config import AppConfig
from YiDict.core.errors import TranslationError
from YiDict.renderers import create_output_writer
from YiDict.speech import Accent, create_speaker
from YiDict.utils.log import configure_logging, log


class CommandRunner:
    """Orchestrates command execution with proper resource management."""

    def __init__(self, config: AppConfig) -> None:
        """Initialize command runner.

        Args:
            config: Application configuration.
        """
        self.config = config

    def run_lookup(self, word: str, accents: Sequence[Accent] = (), *, action: str = "lookup") -> list[Accent]:
        """Execute one lookup with full resource management.

        Args:
            word: Word or phrase to translate.
            accents: Accents to pronounce after rendering, in order.
            action: Command name used for the log file path.

        Returns:
            Accents whose playback failed.

        Raises:
            click.Abort: When the translation fails, or on any unexpected error.
                Speech failures never abort.
        """
        log_path = configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )
        if log_path is not None:
            log.debug("Logging to %s", log_path)
        session = create_session(self.config.backend.proxy)
        try:
            command = LookupCommand(
                translator=build_backend(
                    self.config.backend.name,
                    word=word,
                    session=session,
                    config=self.config,
                ),
                output_writer=create_output_writer(self.config),
                speaker=create_speaker(session, self.config) if accents else None,
                accents=tuple(accents),
            )
            return command.execute()
        except TranslationError as e:
            log.error("Translate failed: %s", e)
            raise click.Abort from e
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Lookup failed: %s", e)
            raise click.Abort from e
        finally:
            session.close()
