"""Tool registry and request dispatch for pdfsuite."""

from __future__ import annotations

from typing import Dict, Iterable

from ...core.utils import get_logger
from .interfaces import BaseTool, OperationKind, TransformRequest, TransformResult

LOGGER = get_logger("pdfsuite.tools.pipeline")


class ToolRegistry:
    """Registry storing available pdfsuite tools."""

    def __init__(self) -> None:
        self._tools: Dict[str, type[BaseTool]] = {}

    def register(self, name: str, tool_class: type[BaseTool]) -> None:
        if name in self._tools:
            raise ValueError(f"Tool '{name}' is already registered")
        self._tools[name] = tool_class

    def create(self, name: str, request: TransformRequest) -> BaseTool:
        try:
            tool_class = self._tools[name]
        except KeyError as exc:
            raise KeyError(f"Tool '{name}' is not registered") from exc
        return tool_class(request)

    def names(self) -> Iterable[str]:
        return sorted(self._tools.keys())


registry = ToolRegistry()


def register_tool(name: str | OperationKind):
    key = name.value if isinstance(name, OperationKind) else name

    def decorator(cls: type[BaseTool]) -> type[BaseTool]:
        registry.register(key, cls)
        return cls

    return decorator


def run_transform(request: TransformRequest) -> TransformResult:
    """Dispatch ``request`` to the tool registered for its operation."""

    from .. import load_builtin_plugins

    load_builtin_plugins()
    tool = registry.create(request.operation.value, request)
    LOGGER.debug("Running %s with %d input(s)", request.operation.value, len(request.inputs))
    result = tool.run()
    LOGGER.info("%s produced %s (%d bytes)", request.operation.value, result.filename, len(result.data))
    return result


__all__ = [
    "ToolRegistry",
    "registry",
    "register_tool",
    "run_transform",
    "BaseTool",
    "TransformRequest",
    "TransformResult",
]
