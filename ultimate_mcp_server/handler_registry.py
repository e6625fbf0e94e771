"""Central registry for tool definitions.

Tools register themselves at import time through the @Tool decorator. Once
every tool module has been imported, build_registry() takes a read-only
snapshot which the RequestProcessor and the info routes share by reference.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Iterator, Mapping

_definitions: dict[str, "ToolDefinition"] = {}


@dataclass(frozen=True)
class ToolDefinition:
    """A named, schema-described tool.

    Attributes:
        name: Unique tool identifier exposed to MCP clients.
        category: Human-readable group, e.g. "Text & Content".
        description: One-line summary shown to the client.
        input_schema: JSON-Schema-like dict. Advisory only, never enforced.
        handler: Callable taking the tool arguments as keyword arguments.
    """

    name: str
    category: str
    description: str
    input_schema: Mapping[str, Any]
    handler: Callable[..., Any]

    def to_listing(self) -> dict[str, Any]:
        """Entry for a tools/list response."""
        return {
            "name": self.name,
            "description": f"[{self.category}] {self.description}",
            "inputSchema": dict(self.input_schema),
        }


def register_definition(definition: ToolDefinition) -> None:
    """Register a tool definition. Names must be unique."""
    if definition.name in _definitions:
        raise ValueError(f"Tool already registered: {definition.name}")
    _definitions[definition.name] = definition


class ToolRegistry:
    """Immutable name -> ToolDefinition mapping.

    Lookup is by exact name only. Iteration follows registration order,
    which is the order tools/list and /tools report.
    """

    def __init__(self, definitions: Mapping[str, ToolDefinition]) -> None:
        self._tools = MappingProxyType(dict(definitions))

    def get(self, name: Any) -> ToolDefinition | None:
        if not isinstance(name, str):
            return None
        return self._tools.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __iter__(self) -> Iterator[ToolDefinition]:
        return iter(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)

    def names(self) -> list[str]:
        return list(self._tools)

    def categories(self) -> dict[str, list[str]]:
        """Tool names grouped by category, in first-seen order."""
        grouped: dict[str, list[str]] = {}
        for definition in self._tools.values():
            grouped.setdefault(definition.category, []).append(definition.name)
        return grouped


def build_registry() -> ToolRegistry:
    """Import every tool module and snapshot the registered definitions."""
    from .primitives import load_all_tools

    load_all_tools()
    return ToolRegistry(_definitions)
