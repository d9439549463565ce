"""Tool registry for MCP server.

Provides decorator-based tool registration with Pydantic param validation.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

from phpunit_mcp.mcp.errors import UnknownToolError

if TYPE_CHECKING:
    from phpunit_mcp.mcp.context import AppContext

# Handler signature: (ctx, validated_params) -> result
HandlerFn = Callable[["AppContext", Any], Awaitable[Any]]


@dataclass
class ToolSpec:
    """Specification for a registered tool."""

    name: str
    handler: HandlerFn
    description: str
    params_model: type[BaseModel]


class ToolRegistry:
    """Registry for MCP tools with decorator-based registration."""

    _instance: ToolRegistry | None = None
    _tools: dict[str, ToolSpec]

    def __new__(cls) -> ToolRegistry:
        """Singleton pattern for global registry."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._tools = {}
        return cls._instance

    def register(
        self,
        name: str,
        description: str,
        params_model: type[BaseModel],
    ) -> Callable[[HandlerFn], HandlerFn]:
        """Decorator to register a tool handler.

        Usage:
            @registry.register("phpunit-run-file", "Run one test file", RunFileParams)
            async def run_file(ctx: AppContext, params: RunFileParams) -> str:
                ...
        """

        def decorator(fn: HandlerFn) -> HandlerFn:
            self._tools[name] = ToolSpec(
                name=name,
                handler=fn,
                description=description,
                params_model=params_model,
            )
            return fn

        return decorator

    async def dispatch(self, name: str, ctx: AppContext, arguments: dict[str, Any]) -> Any:
        """Validate arguments against the tool's params model and invoke it.

        Raises:
            UnknownToolError: If no tool is registered under name.
            pydantic.ValidationError: If arguments do not fit the params model.
        """
        spec = self.get(name)
        if spec is None:
            raise UnknownToolError(name, list(self._tools))
        params = spec.params_model(**arguments)
        return await spec.handler(ctx, params)

    def get_all(self) -> list[ToolSpec]:
        """Get all registered tool specs."""
        return list(self._tools.values())

    def get(self, name: str) -> ToolSpec | None:
        """Get a specific tool spec by name."""
        return self._tools.get(name)

    def clear(self) -> None:
        """Clear all registrations (for testing)."""
        self._tools.clear()


# Global registry instance
registry = ToolRegistry()
