"""
Tagged-name codec: decode container metadata from a raw name and compose it back.

parse() and compose() are pure and never raise. The only place a container
is mutated is write_name(), reached through ManagedContainer.update().
"""

from __future__ import annotations

from dataclasses import replace

from chestmeta import config
from chestmeta._utils import _is_blank, _log_tag_event, _tag_log_enabled
from chestmeta.models import ChestMeta, Container, TagFinding, TagReport
from chestmeta.tags import (
    KIND_CATEGORY,
    KIND_IGNORE,
    KIND_ORDER,
    KIND_UNKNOWN,
    classify_tag,
    find_tag_groups,
    format_tag,
    strip_tag_groups,
)

# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


def _working_name(raw_name, default_name, unnamed=None):
    """Substitute the default name for a never-customized container."""
    if unnamed is None:
        unnamed = config.UNNAMED_NAME
    if raw_name == unnamed:
        return default_name or ""
    return raw_name or ""


def _decode(working, location_name):
    """Scan *working* and return (meta, findings)."""
    groups = find_tag_groups(working)
    classified = [(g, *classify_tag(g.content)) for g in groups]

    last_index: dict[str, int] = {}
    for idx, (_g, kind, _value) in enumerate(classified):
        if kind != KIND_UNKNOWN:
            last_index[kind] = idx

    category = ""
    order = None
    ignored = False
    findings = []
    for idx, (g, kind, value) in enumerate(classified):
        if kind == KIND_IGNORE:
            ignored = True
        elif kind == KIND_CATEGORY:
            category = value
        elif kind == KIND_ORDER:
            order = value
        findings.append(
            TagFinding(
                start=g.start,
                end=g.end,
                content=g.content,
                kind=kind,
                value=value,
                effective=last_index.get(kind) == idx,
            )
        )

    meta = ChestMeta(
        location_name=location_name,
        display_name=strip_tag_groups(working, groups).strip(),
        category=category or "",
        order=order,
        ignored=ignored,
    )
    return meta, tuple(findings)


def parse(raw_name, location_name, default_name, unnamed=None) -> ChestMeta:
    """Decode a container's raw name into metadata.

    If *raw_name* equals the unnamed sentinel (config.UNNAMED_NAME unless
    *unnamed* is given), *default_name* is decoded instead. Duplicate tags
    resolve last-wins; unknown tag content is dropped.
    """
    working = _working_name(raw_name, default_name, unnamed)
    meta, findings = _decode(working, location_name)
    if _tag_log_enabled():
        for f in findings:
            if f.status != "applied":
                _log_tag_event(
                    event=f"tag_{f.status}",
                    content=f.content,
                    kind=f.kind,
                    location=location_name,
                )
    return meta


def inspect(raw_name, location_name, default_name, unnamed=None) -> TagReport:
    """Like parse(), but also report what happened to every tag group."""
    working = _working_name(raw_name, default_name, unnamed)
    meta, findings = _decode(working, location_name)
    return TagReport(
        raw_name=raw_name or "",
        working_name=working,
        meta=meta,
        findings=findings,
    )


def group(meta: ChestMeta) -> str:
    """Return the display bucket: category if set, else location name."""
    return meta.group


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


def compose(meta: ChestMeta) -> str:
    """Compose a raw name. Emission order is fixed: order, ignore, category."""
    name = meta.display_name
    if meta.order is not None:
        name += " " + format_tag(KIND_ORDER, meta.order)
    if meta.ignored:
        name += " " + format_tag(KIND_IGNORE)
    if not _is_blank(meta.category):
        name += " " + format_tag(KIND_CATEGORY, meta.category)
    return name


def _clean_display_name(name):
    """Strip tag groups and surrounding whitespace from a user-supplied name."""
    if name is None:
        return ""
    return strip_tag_groups(str(name)).strip()


def apply_update(
    meta: ChestMeta,
    name: str | None,
    category: str | None,
    order: int | None,
    ignored: bool,
) -> ChestMeta:
    """Return *meta* with all four mutable fields replaced.

    A blank *name* keeps the current display name. *order* and *ignored*
    are replaced unconditionally, so ``order=None`` clears the sort position.
    """
    new_name = _clean_display_name(name)
    return replace(
        meta,
        display_name=new_name if new_name else meta.display_name,
        category=(category or "").strip(),
        order=order,
        ignored=bool(ignored),
    )


def write_name(container: Container, meta: ChestMeta) -> str:
    """Write the composed name to *container*. Returns the written string."""
    raw = compose(meta)
    container.name = raw
    return raw


# ---------------------------------------------------------------------------
# Managed record
# ---------------------------------------------------------------------------


class ManagedContainer:
    """A container paired with its decoded metadata.

    Holds a non-owning reference to the host container and writes through
    it only on update().
    """

    def __init__(self, container: Container, meta: ChestMeta):
        self.container = container
        self._meta = meta

    @classmethod
    def load(cls, container: Container, location_name, default_name, unnamed=None):
        """Decode *container*'s current name."""
        return cls(container, parse(container.name, location_name, default_name, unnamed))

    @property
    def meta(self) -> ChestMeta:
        return self._meta

    @property
    def display_name(self) -> str:
        return self._meta.display_name

    @property
    def category(self) -> str:
        return self._meta.category

    @property
    def order(self) -> int | None:
        return self._meta.order

    @property
    def ignored(self) -> bool:
        return self._meta.ignored

    @property
    def location_name(self) -> str:
        return self._meta.location_name

    def group(self) -> str:
        return group(self._meta)

    def update(self, name, category, order, ignored) -> None:
        """Replace the metadata and write the composed name to the container."""
        meta = apply_update(self._meta, name, category, order, ignored)
        write_name(self.container, meta)
        self._meta = meta

    def __repr__(self):
        return f"ManagedContainer({self._meta!r})"
