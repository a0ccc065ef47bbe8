"""Codec tools: parse, compose, update, group, inspect, registry (no host access)."""

from __future__ import annotations

from chestmeta.exceptions import CliError
from chestmeta.mcp_server._core import _call, _contract_error, _finalize_tool_result
from chestmeta.mcp_server._security import _validate_input, _validate_optional


def _read_args(raw_name, location_name, default_name):
    return {
        "raw_name": _validate_input(raw_name, "raw_name"),
        "location_name": _validate_optional(location_name, "location_name"),
        "default_name": _validate_optional(default_name, "default_name"),
    }


def parse_name(
    raw_name: str,
    location_name: str | None = None,
    default_name: str | None = None,
) -> dict:
    """Decode a container's raw name into display name, category, order, ignored.

    Args:
        raw_name: The container's stored name, e.g. "Storage |5| |cat:Ores|".
        location_name: Place containing the container (used as group fallback).
        default_name: Name to use when the container was never renamed.
    """
    try:
        kwargs = _read_args(raw_name, location_name, default_name)
    except CliError as e:
        return _finalize_tool_result(_contract_error(str(e), "error"))
    return _finalize_tool_result(_call("parse_name", **kwargs))


def group_name(
    raw_name: str,
    location_name: str | None = None,
    default_name: str | None = None,
) -> dict:
    """Get the display group for a raw name: its category, else its location."""
    try:
        kwargs = _read_args(raw_name, location_name, default_name)
    except CliError as e:
        return _finalize_tool_result(_contract_error(str(e), "error"))
    return _finalize_tool_result(_call("group_name", **kwargs))


def inspect_name(
    raw_name: str,
    location_name: str | None = None,
    default_name: str | None = None,
) -> dict:
    """List every |tag| group in a raw name and whether it applied,
    was overridden by a later tag, or was discarded as unrecognized."""
    try:
        kwargs = _read_args(raw_name, location_name, default_name)
    except CliError as e:
        return _finalize_tool_result(_contract_error(str(e), "error"))
    return _finalize_tool_result(_call("inspect_name", **kwargs))


def compose_name(
    name: str,
    category: str | None = None,
    order: int | None = None,
    ignored: bool = False,
    location_name: str | None = None,
) -> dict:
    """Build a raw container name from fields.

    Args:
        name: Display name (tags inside it are stripped).
        category: Category label, or None for no category.
        order: Manual sort order (32-bit integer), or None.
        ignored: Hide the container from normal listings.
        location_name: Location used for the reported group.
    """
    try:
        name = _validate_input(name, "name")
        category = _validate_optional(category, "category")
        location_name = _validate_optional(location_name, "location_name")
    except CliError as e:
        return _finalize_tool_result(_contract_error(str(e), "error"))
    return _finalize_tool_result(
        _call(
            "compose_name",
            name=name,
            category=category,
            order=order,
            ignored=ignored,
            location_name=location_name,
        )
    )


def update_name(
    raw_name: str,
    name: str | None = None,
    category: str | None = None,
    order: int | None = None,
    ignored: bool = False,
    location_name: str | None = None,
    default_name: str | None = None,
) -> dict:
    """Replace the metadata of a raw name and return the rewritten name.

    All fields are replaced: omitted category/order/ignored are cleared.
    An omitted or blank name keeps the current display name.
    Unrecognized tags in the old name are dropped.
    """
    try:
        kwargs = _read_args(raw_name, location_name, default_name)
        name = _validate_optional(name, "name")
        category = _validate_optional(category, "category")
    except CliError as e:
        return _finalize_tool_result(_contract_error(str(e), "error"))
    return _finalize_tool_result(
        _call(
            "update_name",
            name=name,
            category=category,
            order=order,
            ignored=ignored,
            **kwargs,
        )
    )


def get_tag_registry(name: str | None = None) -> dict:
    """Get the recognized tag kinds in canonical emission order.

    Args:
        name: Return only this tag (order, ignore, cat).
    """
    try:
        name = _validate_optional(name, "tag_name")
    except CliError as e:
        return _finalize_tool_result(_contract_error(str(e), "error"))
    return _finalize_tool_result(_call("list_tags", name=name))


def register(mcp):
    """Register all codec tools with the FastMCP instance."""
    mcp.tool()(parse_name)
    mcp.tool()(group_name)
    mcp.tool()(inspect_name)
    mcp.tool()(compose_name)
    mcp.tool()(update_name)
    mcp.tool()(get_tag_registry)
