"""Shared tool interfaces and registry."""

from __future__ import annotations

from .interfaces import BaseTool, InputFile, OperationKind, TransformRequest, TransformResult
from .pipeline import ToolRegistry, register_tool, registry, run_transform

__all__ = [
    "BaseTool",
    "InputFile",
    "OperationKind",
    "ToolRegistry",
    "TransformRequest",
    "TransformResult",
    "register_tool",
    "registry",
    "run_transform",
]
