"""
Code generation backends.
"""

from __future__ import annotations

from .go_backend import DEFAULT_TEMPLATE_DIR, GoBackend

__all__ = ["GoBackend", "DEFAULT_TEMPLATE_DIR"]
