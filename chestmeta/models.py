"""
Typed value models for container metadata and tag inspection.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from chestmeta._utils import _is_blank


class Container(Protocol):
    """Externally owned container whose only persisted field is its name."""

    name: str


@dataclass
class NamedContainer:
    """Minimal in-memory container, used by the CLI and MCP layers."""

    name: str


@dataclass(frozen=True)
class ChestMeta:
    """Decoded metadata for one container.

    ``category`` is "" when the container has no category; ``order`` is
    None when it has no manual sort position.
    """

    location_name: str
    display_name: str
    category: str = ""
    order: int | None = None
    ignored: bool = False

    @property
    def has_category(self) -> bool:
        return not _is_blank(self.category)

    @property
    def group(self) -> str:
        """Bucket used to cluster containers: category if set, else location."""
        return self.category if self.has_category else self.location_name

    def to_dict(self) -> dict:
        from chestmeta.codec import compose

        return {
            "display_name": self.display_name,
            "category": self.category,
            "order": self.order,
            "ignored": self.ignored,
            "location_name": self.location_name,
            "group": self.group,
            "raw_name": compose(self),
        }


@dataclass(frozen=True)
class TagFinding:
    """One tag group found while inspecting a raw name."""

    start: int
    end: int
    content: str
    kind: str
    value: object = None
    effective: bool = False

    @property
    def status(self) -> str:
        if self.kind == "unknown":
            return "discarded"
        return "applied" if self.effective else "overridden"

    def to_dict(self) -> dict:
        return {
            "start": self.start,
            "end": self.end,
            "content": self.content,
            "kind": self.kind,
            "value": self.value,
            "status": self.status,
        }


@dataclass(frozen=True)
class TagReport:
    """Result of inspecting a raw name: every finding plus the decoded meta."""

    raw_name: str
    working_name: str
    meta: ChestMeta
    findings: tuple[TagFinding, ...] = field(default_factory=tuple)

    @property
    def discarded(self) -> tuple[TagFinding, ...]:
        return tuple(f for f in self.findings if f.status == "discarded")

    @property
    def overridden(self) -> tuple[TagFinding, ...]:
        return tuple(f for f in self.findings if f.status == "overridden")

    def to_dict(self) -> dict:
        return {
            "raw_name": self.raw_name,
            "working_name": self.working_name,
            "meta": self.meta.to_dict(),
            "tags": [f.to_dict() for f in self.findings],
            "discarded_count": len(self.discarded),
            "overridden_count": len(self.overridden),
        }
