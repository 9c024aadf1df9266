import os
import json
from typing import Dict, Any
from pydantic import BaseModel

class ServerConfig(BaseModel):
    name: str = "atcoder-hint-mcp"
    version: str = "0.1.0"
    protocol_version: str = "2024-11-05"
    # Answer tools/call for an unregistered tool with a JSON-RPC error
    # instead of dropping the reply.
    reply_unknown_tool: bool = False
    log_level: str = "INFO"

class AtCoderConfig(BaseModel):
    base_url: str = "https://atcoder.jp"
    timeout: float = 30.0
    user_agent: str = "atcoder-hint-mcp/0.1.0"

class Config(BaseModel):
    server: ServerConfig = ServerConfig()
    atcoder: AtCoderConfig = AtCoderConfig()

    @classmethod
    def load(cls, config_path: str = "config.json") -> "Config":
        data: Dict[str, Any] = {}
        if not os.path.exists(config_path):
            # Look next to the package when started from another directory.
            parent_config = os.path.join(os.path.dirname(os.path.dirname(__file__)), "config.json")
            if os.path.exists(parent_config):
                config_path = parent_config
            else:
                config_path = None

        if config_path:
            with open(config_path, "r", encoding="utf-8") as f:
                data = json.load(f)

        # Handle env var overrides
        server_data = data.get("server", {})
        server_data["log_level"] = os.getenv("LOG_LEVEL", server_data.get("log_level", "INFO"))
        atcoder_data = data.get("atcoder", {})
        atcoder_data["base_url"] = os.getenv("ATCODER_BASE_URL", atcoder_data.get("base_url", "https://atcoder.jp"))
        atcoder_data["timeout"] = float(os.getenv("ATCODER_TIMEOUT", atcoder_data.get("timeout", 30.0)))

        data["server"] = server_data
        data["atcoder"] = atcoder_data
        return cls(**data)

    def summary(self) -> Dict[str, Any]:
        """Return a dict representation for the startup log line."""
        return self.model_dump()

# Global config instance
config = Config.load()
