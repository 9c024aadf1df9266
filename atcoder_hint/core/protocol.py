"""JSON-RPC framing for the stdio transport.

One request per input line, one compact JSON envelope per output line.
"""
import json
from typing import Any, Dict, Union

from pydantic import ValidationError

from atcoder_hint.core.errors import DecodeError, JsonRpcError
from atcoder_hint.core.mcp_types import (
    CallTool,
    CallToolParams,
    Initialize,
    InitializedNotification,
    JsonRpcRequest,
    ListTools,
    Other,
)

JSONRPC_VERSION = "2.0"

METHOD_INITIALIZE = "initialize"
METHOD_INITIALIZED = "notifications/initialized"
METHOD_LIST_TOOLS = "tools/list"
METHOD_CALL_TOOL = "tools/call"

RequestVariant = Union[Initialize, InitializedNotification, ListTools, CallTool, Other]


def _reject_constant(name: str) -> None:
    # NaN and Infinity are not JSON; echoing them back would break strict clients.
    raise ValueError(f"non-standard JSON constant {name}")


def decode_request(line: str) -> JsonRpcRequest:
    try:
        message = json.loads(line, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        raise DecodeError(f"invalid JSON: {e}") from e

    if not isinstance(message, dict):
        raise DecodeError(f"expected a JSON object, got {type(message).__name__}")

    try:
        return JsonRpcRequest.model_validate(message)
    except ValidationError as e:
        raise DecodeError("request has no string 'method'") from e


def _call_tool_params(params: Any) -> CallToolParams:
    if not isinstance(params, dict):
        return CallToolParams()
    name = params.get("name")
    arguments = params.get("arguments")
    return CallToolParams(
        name=name if isinstance(name, str) else "",
        arguments=arguments if isinstance(arguments, dict) else {},
    )


def classify(request: JsonRpcRequest) -> RequestVariant:
    """Map a decoded request onto the closed set of variants the dispatcher handles."""
    method = request.method
    if method == METHOD_INITIALIZE:
        return Initialize()
    if method == METHOD_INITIALIZED:
        return InitializedNotification()
    if method == METHOD_LIST_TOOLS:
        return ListTools()
    if method == METHOD_CALL_TOOL:
        params = _call_tool_params(request.params)
        return CallTool(name=params.name, arguments=params.arguments)
    return Other(method=method)


def success_response(request_id: Any, result: Any) -> Dict[str, Any]:
    return {
        "jsonrpc": JSONRPC_VERSION,
        "id": request_id,
        "result": result,
    }


def error_response(request_id: Any, error: JsonRpcError) -> Dict[str, Any]:
    return {
        "jsonrpc": JSONRPC_VERSION,
        "id": request_id,
        "error": error.to_dict(),
    }


def encode_response(envelope: Dict[str, Any]) -> str:
    return json.dumps(envelope, ensure_ascii=False, separators=(",", ":"))
