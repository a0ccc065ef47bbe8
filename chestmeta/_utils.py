"""
Shared pure-utility functions for chestmeta.

These helpers have no business logic. Apart from the opt-in event log,
they have no side effects. They are used across tags.py, codec.py and cli.py.
"""

import json
import re
import sys

from chestmeta import config

# int.TryParse-style integer: optional surrounding whitespace, optional sign,
# ASCII digits only (no underscores, no unicode digits).
_INT_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)[ \t\n\v\f\r]*")


def _is_blank(value):
    """True for None, empty, or whitespace-only strings."""
    return value is None or not str(value).strip()


def _parse_int32(text):
    """Parse a signed 32-bit integer. Returns None instead of raising."""
    if not isinstance(text, str):
        return None
    m = _INT_RE.fullmatch(text)
    if not m:
        return None
    value = int(m.group(1))
    if value < config.ORDER_MIN or value > config.ORDER_MAX:
        return None
    return value


def _tag_log_enabled():
    """True when CHESTMETA_TAG_LOG is set or the CLI runs with --verbose."""
    return config.TAG_LOG_ENABLED or config.RUNTIME_VERBOSE


def _log_tag_event(**fields):
    """Emit structured tag-codec logs to stderr when enabled."""
    if not _tag_log_enabled():
        return
    print("[TAG] " + json.dumps(fields, ensure_ascii=False, sort_keys=True), file=sys.stderr)
