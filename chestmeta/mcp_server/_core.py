"""Core helpers: client caching, _call dispatcher, response contract."""

from __future__ import annotations

from chestmeta import config
from chestmeta.client import TagCodecClient
from chestmeta.exceptions import CliError, SetupError

_client: TagCodecClient | None = None


def _get_client() -> TagCodecClient:
    """Return a cached TagCodecClient, creating one on first use."""
    global _client
    if _client is None:
        config.check_config()
        _client = TagCodecClient()
    return _client


def _contract_error(message: str, error_type: str = "error") -> dict:
    """Return a stable MCP error envelope with legacy compatibility fields."""
    return {
        "ok": False,
        "schema_version": config.CONTRACT_SCHEMA_VERSION,
        "type": error_type,  # legacy
        "error": message,  # legacy
        "error_detail": {
            "type": error_type,
            "message": message,
        },
    }


def _ensure_contract_dict(payload: dict) -> dict:
    """Add stable contract metadata to dict responses."""
    out = dict(payload)
    out.setdefault("schema_version", config.CONTRACT_SCHEMA_VERSION)
    if out.get("ok") is False:
        error_type = str(out.get("type", "error"))
        error_message = out.get("error", "Unknown error")
        if not isinstance(error_message, str):
            error_message = str(error_message)
            out["error"] = error_message
        out.setdefault(
            "error_detail",
            {
                "type": error_type,
                "message": error_message,
            },
        )
        return out
    out.setdefault("ok", True)
    return out


def _finalize_tool_result(result):
    """Finalize tool response based on configured MCP response mode.

    Modes:
        - legacy (default): dicts gain contract metadata (ok/schema_version).
        - envelope: always return {"ok", "schema_version", "data"} for success.
    """
    if isinstance(result, dict):
        normalized = _ensure_contract_dict(result)
        if normalized.get("ok") is False:
            return normalized
        if config.MCP_RESPONSE_MODE == "envelope":
            data = dict(normalized)
            data.pop("ok", None)
            data.pop("schema_version", None)
            return {
                "ok": True,
                "schema_version": config.CONTRACT_SCHEMA_VERSION,
                "data": data,
            }
        return normalized
    if config.MCP_RESPONSE_MODE == "envelope":
        return {
            "ok": True,
            "schema_version": config.CONTRACT_SCHEMA_VERSION,
            "data": result,
        }
    return result


_ALLOWED_METHODS = {
    "parse_name",
    "compose_name",
    "update_name",
    "group_name",
    "inspect_name",
    "list_tags",
}


def _call(method_name: str, **kwargs):
    """Call a TagCodecClient method, converting exceptions to error dicts."""
    if method_name not in _ALLOWED_METHODS:
        return _contract_error(f"Unknown method: {method_name}", "error")
    try:
        client = _get_client()
        return getattr(client, method_name)(**kwargs)
    except SetupError as e:
        return _contract_error(str(e), "setup")
    except CliError as e:
        return _contract_error(str(e), "error")
    except Exception as e:
        return _contract_error(f"Unexpected error: {e}", "error")
