import logging
from typing import Any, Dict, Optional

from atcoder_hint.config import ServerConfig
from atcoder_hint.core.errors import DecodeError, FetchError, JsonRpcError
from atcoder_hint.core.mcp_types import (
    CallTool,
    InitializedNotification,
    Initialize,
    InitializeResult,
    ListTools,
    ServerInfo,
    TextContent,
    ToolCallResult,
    ToolListResult,
)
from atcoder_hint.core.protocol import (
    RequestVariant,
    classify,
    decode_request,
    error_response,
    success_response,
)
from atcoder_hint.tools.registry import Tool, ToolRegistry

logger = logging.getLogger(__name__)

INVALID_PARAMS = -32602


class Dispatcher:
    """Routes one decoded request to its handler and builds the reply envelope.

    Holds no per-request state; the registry is frozen before it is handed in.
    Replies are only built for requests that carried an ``id``.
    """

    def __init__(self, registry: ToolRegistry, server: ServerConfig):
        self._registry = registry
        self._server = server

    async def handle_line(self, line: str) -> Optional[Dict[str, Any]]:
        try:
            request = decode_request(line)
        except DecodeError as e:
            logger.warning(f"Skipping undecodable line: {e}")
            return None

        try:
            result = await self.dispatch(classify(request))
        except JsonRpcError as e:
            if not request.has_id:
                return None
            return error_response(request.id, e)

        if result is None or not request.has_id:
            return None
        return success_response(request.id, result)

    async def dispatch(self, request: RequestVariant) -> Optional[Dict[str, Any]]:
        if isinstance(request, Initialize):
            return InitializeResult(
                protocolVersion=self._server.protocol_version,
                capabilities={"tools": {}},
                serverInfo=ServerInfo(name=self._server.name, version=self._server.version),
            ).model_dump()
        elif isinstance(request, InitializedNotification):
            return None
        elif isinstance(request, ListTools):
            return ToolListResult(tools=self._registry.list_all()).model_dump(exclude_none=True)
        elif isinstance(request, CallTool):
            tool = self._registry.lookup(request.name)
            if tool is None:
                logger.warning(f"Unknown tool requested: {request.name!r}")
                if self._server.reply_unknown_tool:
                    raise JsonRpcError(INVALID_PARAMS, f"Unknown tool: {request.name}")
                return None
            text = await self._call_tool(tool, request.arguments)
            return ToolCallResult(content=[TextContent(text=text)]).model_dump()
        else:
            logger.debug(f"Ignoring method {request.method!r}")
            return None

    async def _call_tool(self, tool: Tool, arguments: Dict[str, Any]) -> str:
        try:
            return await tool.call(arguments)
        except FetchError as e:
            logger.info(f"Tool {tool.name} failed: {e.render()}")
            return e.render()
        except Exception as e:
            logger.exception(f"Tool {tool.name} raised unexpectedly")
            return f"Error: {e}"
