"""
TagCodecClient — public Python API over the tagged-name codec.

Single entry point for programmatic use, the CLI commands and the MCP server.
All methods return flat dicts suitable for JSON serialization.
"""

from __future__ import annotations

from typing import Any

from chestmeta import config
from chestmeta._utils import _is_blank, _parse_int32
from chestmeta.codec import ManagedContainer, _clean_display_name, inspect, parse
from chestmeta.exceptions import CliError
from chestmeta.models import ChestMeta, NamedContainer
from chestmeta.tags import TAGS, get_tag, tag_names


def _resolve_order(order):
    """Accept None, an int, or a numeric string; validate the 32-bit range."""
    if order is None:
        return None
    if isinstance(order, bool):
        raise CliError(f"[ERROR] Invalid order {order!r}: expected an integer.")
    if isinstance(order, int):
        if config.ORDER_MIN <= order <= config.ORDER_MAX:
            return order
        raise CliError(
            f"[ERROR] Order {order} is out of range "
            f"({config.ORDER_MIN} to {config.ORDER_MAX})."
        )
    parsed = _parse_int32(str(order))
    if parsed is None:
        raise CliError(
            f"[ERROR] Invalid order {order!r}: expected an integer between "
            f"{config.ORDER_MIN} and {config.ORDER_MAX}."
        )
    return parsed


def _tag_row(tag):
    return {
        "name": tag.name,
        "kind": tag.kind,
        "syntax": tag.syntax,
        "description": tag.description,
    }


class TagCodecClient:
    """Dict-returning wrappers around parse/compose/update/inspect.

    Args:
        location_name: Fallback location when a call does not pass one.
        default_name: Fallback default name for never-renamed containers.
        unnamed: Sentinel raw name meaning "never customized".
    """

    def __init__(self, location_name=None, default_name=None, unnamed=None):
        self.location_name = config.DEFAULT_LOCATION if location_name is None else location_name
        self.default_name = default_name
        self.unnamed = config.UNNAMED_NAME if unnamed is None else unnamed

    def _location(self, location_name):
        return self.location_name if location_name is None else location_name

    def _default(self, default_name):
        if default_name is not None:
            return default_name
        if self.default_name is not None:
            return self.default_name
        return self.unnamed

    def _parse(self, raw_name, location_name, default_name) -> ChestMeta:
        return parse(
            raw_name,
            self._location(location_name),
            self._default(default_name),
            self.unnamed,
        )

    # -- read --

    def parse_name(self, raw_name, location_name=None, default_name=None) -> dict[str, Any]:
        """Decode a raw container name."""
        return self._parse(raw_name, location_name, default_name).to_dict()

    def group_name(self, raw_name, location_name=None, default_name=None) -> dict[str, Any]:
        """Return the display group for a raw name."""
        meta = self._parse(raw_name, location_name, default_name)
        return {"group": meta.group, "from_category": meta.has_category}

    def inspect_name(self, raw_name, location_name=None, default_name=None) -> dict[str, Any]:
        """Report every tag group in a raw name and what became of it."""
        report = inspect(
            raw_name,
            self._location(location_name),
            self._default(default_name),
            self.unnamed,
        )
        return report.to_dict()

    def list_tags(self, name=None) -> dict[str, Any]:
        """Return the tag registry in emission order, or one tag by *name*."""
        if name is None:
            rows = [_tag_row(t) for t in TAGS]
        else:
            try:
                rows = [_tag_row(get_tag(name))]
            except KeyError:
                raise CliError(
                    f"[ERROR] Unknown tag '{name}'. Valid tags: {', '.join(tag_names())}"
                ) from None
        return {"tags": rows, "count": len(rows)}

    # -- write --

    def compose_name(
        self,
        name,
        category=None,
        order=None,
        ignored=False,
        location_name=None,
    ) -> dict[str, Any]:
        """Compose a raw name from scratch.

        Tag groups inside *name* are stripped first, so a name made only of
        tags is rejected as empty.
        """
        if _is_blank(_clean_display_name(name)):
            raise CliError("[ERROR] Name cannot be empty.")
        base = ChestMeta(location_name=self._location(location_name), display_name="")
        container = NamedContainer(name="")
        record = ManagedContainer(container, base)
        record.update(name, category, _resolve_order(order), ignored)
        return {"raw_name": container.name, "meta": record.meta.to_dict()}

    def update_name(
        self,
        raw_name,
        name=None,
        category=None,
        order=None,
        ignored=False,
        location_name=None,
        default_name=None,
    ) -> dict[str, Any]:
        """Decode *raw_name*, replace its metadata, and return the new raw name.

        Full-replace semantics: omitted category/order/ignored are cleared;
        an omitted or blank name keeps the current display name.
        """
        resolved_order = _resolve_order(order)
        container = NamedContainer(name=raw_name)
        record = ManagedContainer.load(
            container,
            self._location(location_name),
            self._default(default_name),
            self.unnamed,
        )
        record.update(name, category, resolved_order, ignored)
        return {
            "previous_raw_name": raw_name,
            "raw_name": container.name,
            "changed": container.name != raw_name,
            "meta": record.meta.to_dict(),
        }
