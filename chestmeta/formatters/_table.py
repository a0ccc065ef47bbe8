"""Plain-text building blocks for table output: cell cleanup, key/value blocks, grids."""

import re

_CONTROL_RE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]|[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")


def _trunc(s, maxlen):
    """Truncate string with ellipsis indicator."""
    if not s:
        return ""
    return s[: maxlen - 1] + "…" if len(s) > maxlen else s


def _sanitize_str(s):
    """Strip ANSI escape sequences and control chars from table output.
    Preserves newlines (\\n) and tabs (\\t)."""
    if not s:
        return s
    return _CONTROL_RE.sub("", str(s))


def _dash(value):
    """Render None and "" as "-" so empty fields stay visible."""
    if value is None or value == "":
        return "-"
    return str(value)


def _cell(value):
    return _sanitize_str(_dash(value))


def _kv_lines(pairs, width=10):
    """Render (label, value) pairs as ``Label:`` left-aligned in *width* columns."""
    return "\n".join(f"{label + ':':<{width}} {_cell(value)}" for label, value in pairs)


def _table(headers, rows, footer=None):
    """Build a grid whose columns fit their widest cell.

    The last column is not padded. Empty cells render as "-". A footer, if
    given, follows after a blank line.
    """
    cells = [[_cell(v) for v in row] for row in rows]
    widths = [len(h) for h in headers]
    for row in cells:
        for i, text in enumerate(row):
            widths[i] = max(widths[i], len(text))

    def render(values):
        padded = [f"{v:<{widths[i]}}" for i, v in enumerate(values[:-1])]
        return "  ".join([*padded, values[-1]])

    lines = [render(list(headers))]
    body = [render(row) for row in cells]
    lines.append("-" * max(len(line) for line in lines + body))
    lines.extend(body)
    if footer:
        lines.append(f"\n{footer}")
    return "\n".join(lines)
