"""chestmeta — metadata for storage containers encoded as |tags| in their names."""

from chestmeta.client import TagCodecClient
from chestmeta.codec import (
    ManagedContainer,
    apply_update,
    compose,
    group,
    inspect,
    parse,
    write_name,
)
from chestmeta.config import VERSION
from chestmeta.exceptions import CliError, SetupError
from chestmeta.models import ChestMeta, Container, NamedContainer, TagFinding, TagReport
from chestmeta.types import (
    ComposeResult,
    GroupResult,
    InspectResult,
    MetaRow,
    TagListResult,
    UpdateResult,
)

__all__ = [
    "VERSION",
    "TagCodecClient",
    "ManagedContainer",
    "ChestMeta",
    "Container",
    "NamedContainer",
    "TagFinding",
    "TagReport",
    "CliError",
    "SetupError",
    "apply_update",
    "compose",
    "group",
    "inspect",
    "parse",
    "write_name",
    "ComposeResult",
    "GroupResult",
    "InspectResult",
    "MetaRow",
    "TagListResult",
    "UpdateResult",
]
