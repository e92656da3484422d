"""Translation backends.

Each backend turns one provider's wire format into a ``Translation``. Use
``build_backend`` to pick one by name.
"""

from __future__ import annotations

from YiDict.backends.base import Translator
from YiDict.backends.http import create_session
from YiDict.backends.registry import build_backend, supported_backend_names

__all__ = [
    "Translator",
    "build_backend",
    "create_session",
    "supported_backend_names",
]
