from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

class JsonRpcRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    jsonrpc: Optional[str] = None
    method: str = Field(strict=True)
    params: Optional[Any] = None
    # Opaque: echoed back exactly as received, whatever its JSON type.
    id: Optional[Any] = None

    @property
    def has_id(self) -> bool:
        """True when the request carried an ``id`` key, even ``null``."""
        return "id" in self.model_fields_set

class CallToolParams(BaseModel):
    name: str = ""
    arguments: Dict[str, Any] = {}

# Request variants produced by protocol.classify

class Initialize(BaseModel):
    pass

class InitializedNotification(BaseModel):
    pass

class ListTools(BaseModel):
    pass

class CallTool(BaseModel):
    name: str
    arguments: Dict[str, Any] = {}

class Other(BaseModel):
    method: str

class ToolInputSchema(BaseModel):
    type: str = "object"
    properties: Dict[str, Any]
    required: Optional[List[str]] = None

class ToolDefinition(BaseModel):
    name: str
    description: Optional[str] = None
    inputSchema: ToolInputSchema

class ToolListResult(BaseModel):
    tools: List[ToolDefinition]

class ServerInfo(BaseModel):
    name: str
    version: str

class InitializeResult(BaseModel):
    protocolVersion: str
    capabilities: Dict[str, Any] = {"tools": {}}
    serverInfo: ServerInfo

class TextContent(BaseModel):
    type: str = "text"
    text: str

class ToolCallResult(BaseModel):
    content: List[TextContent]
