"""Output formatting package for chestmeta.

Re-exports all public names so consumers can do:
    from chestmeta.formatters import format_meta_table
"""

from chestmeta.formatters._core import output, pretty_print, warn
from chestmeta.formatters._records import (
    format_compose_table,
    format_group_table,
    format_inspect_table,
    format_meta_table,
    format_tags_table,
    format_update_table,
)
from chestmeta.formatters._table import (
    _CONTROL_RE,
    _dash,
    _kv_lines,
    _sanitize_str,
    _table,
    _trunc,
)

__all__ = [
    "_CONTROL_RE",
    "_dash",
    "_kv_lines",
    "_sanitize_str",
    "_table",
    "_trunc",
    "format_compose_table",
    "format_group_table",
    "format_inspect_table",
    "format_meta_table",
    "format_tags_table",
    "format_update_table",
    "output",
    "pretty_print",
    "warn",
]
