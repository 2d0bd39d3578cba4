"""
HTTP front door for the Polymarket MCP server.

Routes by path suffix, whatever the prefix:
  OPTIONS *          -- CORS preflight
  */sse              -- event stream (connection notice + keep-alives)
  POST */messages    -- JSON-RPC messages
  anything else      -- plain-text banner
"""

from __future__ import annotations

import argparse
import json
import logging
from contextlib import asynccontextmanager
from typing import Any

import mcp.types as types
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response, StreamingResponse

from ..config import load_config
from ..polymarket import gamma
from .server import PolymarketMCPServer
from .sse import KEEPALIVE_INTERVAL, SSEConnection

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "*",
}

SSE_HEADERS = {
    "Content-Type": "text/event-stream",
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
}

BANNER = "Polymarket MCP Server - Working! Use /sse endpoint for SSE connection."

_ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


# ── Responses ────────────────────────────────────────────────────────

def preflight_response() -> Response:
    return Response(status_code=200, headers=CORS_HEADERS)


def sse_response(keepalive_interval: float = KEEPALIVE_INTERVAL) -> StreamingResponse:
    connection = SSEConnection(keepalive_interval=keepalive_interval)
    return StreamingResponse(
        connection.frames(),
        headers={**CORS_HEADERS, **SSE_HEADERS},
    )


async def messages_response(request: Request, server: PolymarketMCPServer) -> JSONResponse:
    try:
        payload = await request.json()
        logger.info("Received message: %s", json.dumps(payload))
        response = await server.handle_message(payload)
    except Exception as e:
        logger.exception("Error handling message")
        return JSONResponse(
            status_code=500,
            content=internal_error(e),
            headers=CORS_HEADERS,
        )

    body = response.to_dict()
    logger.info("Sending response: %s", json.dumps(body))
    return JSONResponse(content=body, headers=CORS_HEADERS)


def internal_error(exc: Exception) -> dict[str, Any]:
    return {
        "jsonrpc": "2.0",
        "id": None,
        "error": types.ErrorData(
            code=types.INTERNAL_ERROR,
            message="Internal error",
            data=f"{type(exc).__name__}: {exc}",
        ).model_dump(by_alias=True, exclude_none=True),
    }


def banner_response() -> PlainTextResponse:
    return PlainTextResponse(BANNER, headers=CORS_HEADERS)


# ── App ──────────────────────────────────────────────────────────────

def create_app(config: dict | None = None) -> FastAPI:
    """Build the FastAPI app. ``config`` defaults to ``load_config()``."""
    if config is None:
        config = load_config()
    keepalive_interval = float(
        config.get("sse", {}).get("keepalive_interval", KEEPALIVE_INTERVAL)
    )
    server = PolymarketMCPServer()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        await gamma.close_client()

    app = FastAPI(title=server.name, version=server.version, lifespan=lifespan)
    app.state.mcp_server = server

    @app.api_route("/{path:path}", methods=_ALL_METHODS)
    async def handle(request: Request, path: str) -> Response:
        url_path = request.url.path
        if request.method == "OPTIONS":
            return preflight_response()
        if url_path.endswith("/sse"):
            return sse_response(keepalive_interval)
        if url_path.endswith("/messages") and request.method == "POST":
            return await messages_response(request, server)
        return banner_response()

    # methods outside _ALL_METHODS (TRACE, PROPFIND, ...) still get the banner
    @app.exception_handler(405)
    async def method_not_allowed(request: Request, exc: Exception) -> Response:
        return banner_response()

    return app


# ── Entry point ──────────────────────────────────────────────────────

def main() -> None:
    parser = argparse.ArgumentParser(description="Polymarket MCP Server")
    parser.add_argument("--config", default="config.yaml", help="Config file path")
    parser.add_argument("--host", help="Bind address (overrides config)")
    parser.add_argument("--port", type=int, help="Bind port (overrides config)")
    parser.add_argument("--log-level", help="Logging level (overrides config)")
    args = parser.parse_args()

    config = load_config(args.config)
    if args.host:
        config["server"]["host"] = args.host
    if args.port:
        config["server"]["port"] = args.port
    if args.log_level:
        config["logging"]["level"] = args.log_level

    logging.basicConfig(
        level=config["logging"]["level"].upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    logger.info(
        "Starting MCP server on %s:%s ...",
        config["server"]["host"], config["server"]["port"],
    )
    uvicorn.run(
        create_app(config),
        host=config["server"]["host"],
        port=config["server"]["port"],
    )


if __name__ == "__main__":
    main()
