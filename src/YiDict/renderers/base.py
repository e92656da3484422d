"""Base classes for output writers.

Separates lookup control flow from presentation for better testability.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

import click

from YiDict.core.models import Translation

Emit = Callable[[str], None]


class OutputWriter(ABC):
    """Abstract base class for translation output writers.

    Attributes:
        emit: Callable receiving each rendered block; defaults to ``click.echo``.
    """

    def __init__(self, emit: Emit | None = None) -> None:
        self.emit: Emit = emit or click.echo

    @abstractmethod
    def write(self, translation: Translation) -> None:
        """Write one translation result.

        Args:
            translation: Result of a lookup.
        """
