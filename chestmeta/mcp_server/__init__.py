"""MCP server exposing TagCodecClient methods as tools.

Package structure:
  __init__.py       — FastMCP init, register() calls, re-exports
  __main__.py       — ``python -m chestmeta.mcp_server`` entry point
  _core.py          — Client caching, _call dispatcher, response contract
  _security.py      — Input validation
  _tools_codec.py   — 6 codec tools (parse, group, inspect, compose, update, registry)

Run: python -m chestmeta.mcp_server
Requires: pip install .[mcp]
"""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from chestmeta.mcp_server import _tools_codec

mcp = FastMCP(
    "chestmeta",
    instructions=(
        "Tools for container names that carry metadata as |tag| groups. "
        "Tags: |<integer>| sort order, |ignore| hidden, |cat:<text>| category. "
        "update_name replaces every field: pass the current category/order/ignored "
        "to keep them. Unrecognized tags are dropped on update; call inspect_name "
        "first to see what would be lost."
    ),
)

_tools_codec.register(mcp)

# ---------------------------------------------------------------------------
# Re-exports (tests import via mcp_mod.xxx)
# ---------------------------------------------------------------------------

from chestmeta.mcp_server._core import (  # noqa: E402, F401
    _call,
    _contract_error,
    _ensure_contract_dict,
    _finalize_tool_result,
    _get_client,
)
from chestmeta.mcp_server._security import _validate_input  # noqa: E402, F401
from chestmeta.mcp_server._tools_codec import (  # noqa: E402, F401
    compose_name,
    get_tag_registry,
    group_name,
    inspect_name,
    parse_name,
    update_name,
)


def main():
    """Run the MCP server (stdio transport)."""
    mcp.run()
