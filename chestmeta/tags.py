"""Tag registry and scanner for the pipe-delimited name mini-language.

A container name carries metadata as tag groups: ``|<content>|`` where the
content is non-empty and holds no pipe. Adding a new tag kind means
appending one TagDefinition to TAGS and teaching ``classify_tag`` about it;
``format_tag`` renders from the definition's template. TAGS is kept in
canonical emission order.
"""

from dataclasses import dataclass
from typing import Any

from chestmeta._utils import _parse_int32

PIPE = "|"
CATEGORY_PREFIX = "cat:"
IGNORE_KEYWORD = "ignore"

KIND_ORDER = "order"
KIND_IGNORE = "ignore"
KIND_CATEGORY = "category"
KIND_UNKNOWN = "unknown"


@dataclass(frozen=True)
class TagDefinition:
    """One recognized tag kind."""

    name: str
    kind: str
    syntax: str
    description: str
    template: str


TAGS: tuple[TagDefinition, ...] = (
    TagDefinition(
        "order",
        KIND_ORDER,
        "|<integer>|",
        "Manual sort position (32-bit integer)",
        "{value}",
    ),
    TagDefinition(
        "ignore",
        KIND_IGNORE,
        "|ignore|",
        "Hide the container from normal listings",
        IGNORE_KEYWORD,
    ),
    TagDefinition(
        "cat",
        KIND_CATEGORY,
        "|cat:<text>|",
        "Group the container under a category",
        CATEGORY_PREFIX + "{value}",
    ),
)


@dataclass(frozen=True)
class TagGroup:
    """A matched ``|content|`` span. ``end`` is exclusive."""

    start: int
    end: int
    content: str


# -- Registry helpers --


def get_tag(name: str) -> TagDefinition:
    """Return a tag by name. Raises KeyError if not found."""
    for tag in TAGS:
        if tag.name == name:
            return tag
    raise KeyError(f"Unknown tag: {name!r}")


def tag_for_kind(kind: str) -> TagDefinition:
    """Return the tag definition for a kind. Raises KeyError if unknown."""
    for tag in TAGS:
        if tag.kind == kind:
            return tag
    raise KeyError(f"No tag defined for kind: {kind!r}")


def tag_names() -> tuple[str, ...]:
    """Return all tag names in emission order."""
    return tuple(tag.name for tag in TAGS)


# -- Scanner --


def find_tag_groups(text: str) -> list[TagGroup]:
    """Scan *text* left to right for non-overlapping tag groups.

    An empty pair ``||`` is not a group; its closing pipe becomes the
    next candidate opener.
    """
    groups: list[TagGroup] = []
    if not text:
        return groups
    i = text.find(PIPE)
    while i != -1:
        j = text.find(PIPE, i + 1)
        if j == -1:
            break
        if j == i + 1:
            i = j
            continue
        groups.append(TagGroup(start=i, end=j + 1, content=text[i + 1 : j]))
        i = text.find(PIPE, j + 1)
    return groups


def strip_tag_groups(text: str, groups: list[TagGroup] | None = None) -> str:
    """Remove tag groups from *text* (no trimming)."""
    if groups is None:
        groups = find_tag_groups(text)
    if not groups:
        return text
    parts = []
    pos = 0
    for g in groups:
        parts.append(text[pos : g.start])
        pos = g.end
    parts.append(text[pos:])
    return "".join(parts)


def classify_tag(content: str) -> tuple[str, Any]:
    """Decode one tag's content into (kind, value).

    Keywords match case-insensitively, payloads keep their case.
    Unrecognized content returns (KIND_UNKNOWN, None).
    """
    lowered = content.lower()
    if lowered == IGNORE_KEYWORD:
        return KIND_IGNORE, True
    if lowered.startswith(CATEGORY_PREFIX):
        return KIND_CATEGORY, content[len(CATEGORY_PREFIX) :].strip()
    order = _parse_int32(content)
    if order is not None:
        return KIND_ORDER, order
    return KIND_UNKNOWN, None


# -- Emission --


def format_tag(kind: str, value=None) -> str:
    """Render one tag group for a kind. Raises KeyError for unknown kinds."""
    content = tag_for_kind(kind).template.format(value=value)
    return f"{PIPE}{content}{PIPE}"
