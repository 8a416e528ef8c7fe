"""Template i18n coverage lint package."""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = [
    "i18n_check",
    "models",
    "template",
]
