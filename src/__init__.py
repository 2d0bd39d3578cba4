"""
Polymarket MCP — read-only prediction-market queries over MCP-style JSON-RPC.

Layers:
  polymarket/   — Gamma API client and market models
  mcp/          — Tool catalog, JSON-RPC dispatch, HTTP/SSE gateway
  config.py     — Defaults, YAML config and environment overrides
"""
