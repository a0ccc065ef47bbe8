"""Table formatters for decoded metadata, inspections, and the tag registry."""

from chestmeta.formatters._table import _kv_lines, _sanitize_str, _table, _trunc


def format_meta_table(meta):
    """Format a decoded metadata dict as aligned key/value lines."""
    rows = [
        ("Name", meta.get("display_name")),
        ("Category", meta.get("category")),
        ("Order", meta.get("order")),
        ("Ignored", "yes" if meta.get("ignored") else "no"),
        ("Location", meta.get("location_name")),
        ("Group", meta.get("group")),
        ("Raw name", meta.get("raw_name")),
    ]
    return _kv_lines(rows)


def format_compose_table(result):
    return _sanitize_str(result.get("raw_name", ""))


def format_update_table(result):
    """Format an update result: old and new raw names, then the metadata."""
    lines = [
        _kv_lines(
            [("Before", result.get("previous_raw_name")), ("After", result.get("raw_name"))]
        )
    ]
    if not result.get("changed"):
        lines.append("(unchanged)")
    lines.append("")
    lines.append(format_meta_table(result.get("meta", {})))
    return "\n".join(lines)


def format_group_table(result):
    source = "category" if result.get("from_category") else "location"
    return f"{_sanitize_str(result.get('group') or '')} ({source})"


def format_inspect_table(report):
    """Format an inspection report as a table of tag groups."""
    tags = report.get("tags", [])
    meta = report.get("meta", {})
    header = f"Name: {_sanitize_str(meta.get('display_name') or '')}"
    if not tags:
        return header + "\nNo tag groups found."
    rows = [
        (
            f"{t['start']}-{t['end']}",
            _trunc(t["content"], 24),
            t["kind"],
            t["status"],
            t.get("value"),
        )
        for t in tags
    ]
    footer = (
        f"Total: {len(tags)} tag groups "
        f"({report.get('discarded_count', 0)} discarded, "
        f"{report.get('overridden_count', 0)} overridden)"
    )
    table = _table(
        ["Span", "Content", "Kind", "Status", "Value"],
        rows,
        footer,
    )
    return header + "\n\n" + table


def format_tags_table(result):
    """Format the tag registry."""
    rows = [(t["name"], t["kind"], t["syntax"], t["description"]) for t in result.get("tags", [])]
    count = result.get("count", len(rows))
    noun = "tag" if count == 1 else "tags"
    return _table(["Name", "Kind", "Syntax", "Description"], rows, f"Total: {count} {noun}")
