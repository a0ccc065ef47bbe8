"""Security: input validation for tool arguments."""

from __future__ import annotations

import re

from chestmeta.exceptions import CliError

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")
_INPUT_LIMITS = {
    "raw_name": 2000,
    "name": 500,
    "category": 200,
    "location_name": 200,
    "default_name": 500,
    "tag_name": 50,
}


def _validate_input(text: str, field: str) -> str:
    """Strip control characters and enforce length limits.

    Raises CliError if text is not a string or exceeds the field limit.
    """
    if not isinstance(text, str):
        raise CliError(f"[ERROR] {field} must be a string")
    cleaned = _CONTROL_RE.sub("", text)
    limit = _INPUT_LIMITS.get(field, 2000)
    if len(cleaned) > limit:
        raise CliError(f"[ERROR] {field} exceeds maximum length of {limit} characters")
    return cleaned


def _validate_optional(text: str | None, field: str) -> str | None:
    if text is None:
        return None
    return _validate_input(text, field)
