from typing import Awaitable, Callable, Dict, Any, List, Optional
from atcoder_hint.core.mcp_types import ToolDefinition, ToolInputSchema

ToolHandler = Callable[..., Awaitable[str]]

class Tool:
    def __init__(self, definition: ToolDefinition, handler: ToolHandler):
        self.definition = definition
        self.handler = handler

    @property
    def name(self) -> str:
        return self.definition.name

    def bind_arguments(self, arguments: Dict[str, Any]) -> Dict[str, str]:
        """Pick the declared string parameters out of ``arguments``.

        Missing or non-string values become ``""``; the handler decides
        whether that is acceptable. Undeclared keys are dropped.
        """
        bound = {}
        for key in self.definition.inputSchema.properties:
            value = arguments.get(key)
            bound[key] = value if isinstance(value, str) else ""
        return bound

    async def call(self, arguments: Dict[str, Any]) -> str:
        return await self.handler(**self.bind_arguments(arguments))

class ToolRegistry:
    def __init__(self):
        self._tools: Dict[str, Tool] = {}
        self._frozen = False

    def register(self, name: str, description: str, input_schema: Dict[str, Any]):
        def decorator(func: ToolHandler):
            if self._frozen:
                raise RuntimeError(f"Cannot register tool {name}: registry is frozen")
            if name in self._tools:
                raise ValueError(f"Tool {name} is already registered")
            self._tools[name] = Tool(
                ToolDefinition(
                    name=name,
                    description=description,
                    inputSchema=ToolInputSchema(**input_schema)
                ),
                func,
            )
            return func
        return decorator

    def freeze(self) -> "ToolRegistry":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def lookup(self, name: str) -> Optional[Tool]:
        return self._tools.get(name)

    def list_all(self) -> List[ToolDefinition]:
        return [tool.definition.model_copy(deep=True) for tool in self._tools.values()]
