"""Typed response definitions for TagCodecClient methods.

These TypedDicts document the shape of dicts returned by public API methods.
They are optional — runtime behavior is unchanged (plain dicts).
"""

from __future__ import annotations

from typing import TypedDict


class MetaRow(TypedDict):
    """Decoded container metadata, as returned by parse_name()."""

    display_name: str
    category: str
    order: int | None
    ignored: bool
    location_name: str
    group: str
    raw_name: str


class ComposeResult(TypedDict):
    """Return type of TagCodecClient.compose_name()."""

    raw_name: str
    meta: MetaRow


class UpdateResult(TypedDict):
    """Return type of TagCodecClient.update_name()."""

    previous_raw_name: str
    raw_name: str
    changed: bool
    meta: MetaRow


class GroupResult(TypedDict):
    """Return type of TagCodecClient.group_name()."""

    group: str
    from_category: bool


class TagFindingRow(TypedDict):
    start: int
    end: int
    content: str
    kind: str
    value: object
    status: str


class InspectResult(TypedDict):
    """Return type of TagCodecClient.inspect_name()."""

    raw_name: str
    working_name: str
    meta: MetaRow
    tags: list[TagFindingRow]
    discarded_count: int
    overridden_count: int


class TagRow(TypedDict):
    name: str
    kind: str
    syntax: str
    description: str


class TagListResult(TypedDict):
    """Return type of TagCodecClient.list_tags()."""

    tags: list[TagRow]
    count: int
