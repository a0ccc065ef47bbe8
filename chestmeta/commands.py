"""
Command implementations for chestmeta.
Each cmd_*() function receives an argparse.Namespace and handles one CLI command.

Codec logic lives in client.py (TagCodecClient). These thin wrappers
handle argparse → keyword args, format selection, and formatter dispatch.
"""

from chestmeta.client import TagCodecClient
from chestmeta.formatters import (
    format_compose_table,
    format_group_table,
    format_inspect_table,
    format_meta_table,
    format_tags_table,
    format_update_table,
    output,
    warn,
)


def _client(ns):
    return TagCodecClient(
        location_name=getattr(ns, "location", None),
        default_name=getattr(ns, "default_name", None),
    )


def _warn_pipes(meta):
    """Warn when a field holds a pipe, since the written name may not read back."""
    fields = (("Name", meta.get("display_name")), ("Category", meta.get("category")))
    for label, value in fields:
        if value and "|" in value:
            warn(f"{label} '{value}' contains '|'; the written name may not read back.")


def cmd_parse(ns):
    result = _client(ns).parse_name(ns.raw_name)
    output(result, format_meta_table, ns.format)


def cmd_group(ns):
    result = _client(ns).group_name(ns.raw_name)
    output(result, format_group_table, ns.format)


def cmd_inspect(ns):
    result = _client(ns).inspect_name(ns.raw_name)
    output(result, format_inspect_table, ns.format)


def cmd_compose(ns):
    result = _client(ns).compose_name(
        ns.name,
        category=ns.category,
        order=ns.order,
        ignored=ns.ignored,
    )
    _warn_pipes(result["meta"])
    output(result, format_compose_table, ns.format)


def cmd_update(ns):
    client = _client(ns)
    report = client.inspect_name(ns.raw_name)
    for finding in report["tags"]:
        if finding["status"] == "discarded":
            warn(f"Unrecognized tag |{finding['content']}| will be dropped from the name.")
    result = client.update_name(
        ns.raw_name,
        name=ns.name,
        category=ns.category,
        order=ns.order,
        ignored=ns.ignored,
    )
    _warn_pipes(result["meta"])
    output(result, format_update_table, ns.format)


def cmd_tags(ns):
    result = TagCodecClient().list_tags(getattr(ns, "name", None))
    output(result, format_tags_table, ns.format)
