"""JSON-RPC envelope models for the MCP message endpoint."""

from __future__ import annotations

from typing import Any, Optional

import mcp.types as types
from pydantic import BaseModel, Field, field_validator


class RPCRequest(BaseModel):
    jsonrpc: Any = "2.0"
    id: Any = None
    method: Any = None
    params: dict[str, Any] = Field(default_factory=dict)

    @field_validator("params", mode="before")
    @classmethod
    def _params(cls, v: Any) -> Any:
        # only tools/call reads params; anything but a mapping reads as empty
        return v if isinstance(v, dict) else {}


class RPCResponse(BaseModel):
    jsonrpc: str = "2.0"
    id: Any = None
    result: Optional[dict[str, Any]] = None
    error: Optional[types.ErrorData] = None

    def to_dict(self) -> dict[str, Any]:
        """Wire form: ``id`` always present, then exactly one of result/error."""
        data: dict[str, Any] = {"jsonrpc": self.jsonrpc, "id": self.id}
        if self.error is not None:
            data["error"] = self.error.model_dump(by_alias=True, exclude_none=True)
        else:
            data["result"] = self.result if self.result is not None else {}
        return data
