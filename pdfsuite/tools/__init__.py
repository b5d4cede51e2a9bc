"""Namespace for pluggable pdfsuite tools."""

from __future__ import annotations

from .common.pipeline import registry


def load_builtin_plugins() -> None:
    from . import editing  # noqa: F401  # register merge, split, rotate, protect, unlock, watermark
    from . import external  # noqa: F401  # register compress and convert


__all__ = ["registry", "load_builtin_plugins"]
