"""
Polymarket MCP server: tool catalog, tool execution and JSON-RPC dispatch.

Tools:
  - get-market-info
  - list-markets
  - get-market-prices
"""

from __future__ import annotations

import json
import logging
from typing import Any

import mcp.types as types

from ..polymarket import gamma
from ..polymarket.models import Market
from .formatting import (
    MARKET_NOT_FOUND,
    NO_MARKETS_FOUND,
    format_market_info,
    format_market_list,
    format_market_prices,
)
from .models import RPCRequest, RPCResponse

logger = logging.getLogger(__name__)

SERVER_NAME = "polymarket-mcp"
SERVER_VERSION = "1.0.0"
PROTOCOL_VERSION = "0.1.0"


class PolymarketMCPServer:

    def __init__(self, name: str = SERVER_NAME, version: str = SERVER_VERSION):
        self.name = name
        self.version = version
        self.tools = self._tools()

    # ── Tool catalog ─────────────────────────────────────────────────

    @staticmethod
    def _tools() -> list[types.Tool]:
        return [
            types.Tool(
                name="get-market-info",
                description="Get detailed information about a specific prediction market",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "market_id": {
                            "type": "string",
                            "description": (
                                "Market ID or slug "
                                "(e.g., 'will-bitcoin-reach-100k-by-2024')"
                            ),
                        },
                    },
                    "required": ["market_id"],
                },
            ),
            types.Tool(
                name="list-markets",
                description="List available prediction markets with filtering options",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "closed": {
                            "type": "boolean",
                            "description": (
                                "Filter by market status "
                                "(true for closed, false for open)"
                            ),
                            "default": False,
                        },
                        "limit": {
                            "type": "integer",
                            "description": "Number of markets to return",
                            "default": 10,
                            "minimum": 1,
                            "maximum": 100,
                        },
                        "offset": {
                            "type": "integer",
                            "description": "Number of markets to skip (for pagination)",
                            "default": 0,
                            "minimum": 0,
                        },
                    },
                },
            ),
            types.Tool(
                name="get-market-prices",
                description="Get current prices and trading information for a specific market",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "market_id": {
                            "type": "string",
                            "description": "Market ID or slug",
                        },
                    },
                    "required": ["market_id"],
                },
            ),
        ]

    # ── Tool execution ───────────────────────────────────────────────

    async def call_tool(self, name: str, arguments: dict[str, Any]) -> str:
        """Run a tool and return its text. Failures come back as ``Error: ...``."""
        try:
            return await self._dispatch(name, arguments)
        except Exception as e:
            logger.error("Tool %s failed: %s", name, e)
            return f"Error: {e}"

    async def _dispatch(self, name: str, args: dict[str, Any]) -> str:
        if name == "get-market-info":
            data = await gamma.get_market(args.get("market_id"))
            if not data:
                return MARKET_NOT_FOUND
            return format_market_info(Market.model_validate(data))

        if name == "list-markets":
            # limit/offset of 0 are treated as unset
            data = await gamma.list_markets(
                closed=args.get("closed"),
                limit=args.get("limit") or None,
                offset=args.get("offset") or None,
            )
            if not data:
                return NO_MARKETS_FOUND
            return format_market_list([Market.model_validate(m) for m in data])

        if name == "get-market-prices":
            data = await gamma.get_market(args.get("market_id"))
            if not data:
                return MARKET_NOT_FOUND
            return format_market_prices(Market.model_validate(data))

        raise ValueError(f"Unknown tool: {name}")

    # ── JSON-RPC dispatch ────────────────────────────────────────────

    async def handle_message(self, payload: Any) -> RPCResponse:
        """
        Dispatch one JSON-RPC message.

        Raises pydantic ``ValidationError`` only when ``payload`` is not a JSON
        object; unknown methods and tool failures are answered in-band.
        """
        request = RPCRequest.model_validate(payload)
        response = RPCResponse(id=request.id)
        method = request.method

        if method == "initialize":
            response.result = {
                "protocolVersion": PROTOCOL_VERSION,
                "capabilities": {
                    "tools": {},
                    "prompts": {},
                },
                "serverInfo": types.Implementation(
                    name=self.name, version=self.version
                ).model_dump(by_alias=True, exclude_none=True),
            }

        elif method == "tools/list":
            response.result = {
                "tools": [tool.model_dump(by_alias=True, exclude_none=True) for tool in self.tools]
            }

        elif method == "tools/call":
            name = request.params.get("name")
            arguments = request.params.get("arguments") or {}
            logger.info("Calling tool: %s with args: %s", name, json.dumps(arguments, default=str))
            text = await self.call_tool(name, arguments)
            response.result = {
                "content": [
                    types.TextContent(type="text", text=text).model_dump(
                        by_alias=True, exclude_none=True
                    )
                ]
            }

        elif method == "prompts/list":
            response.result = {"prompts": []}

        else:
            logger.warning("Method not found: %s", method)
            response.error = types.ErrorData(
                code=types.METHOD_NOT_FOUND,
                message=f"Method not found: {method}",
            )

        return response
