from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class DuplicatePolicy(str, Enum):
    """What `GraphStore.create_entity` does when the id is already stored."""

    OVERWRITE = "overwrite"
    REJECT = "reject"


@dataclass(slots=True)
class Entity:
    """A stored record (a person or a post).

    `id` is the store key and never changes. `type` and `attributes` are
    replaced in place when the same id is created again under the
    overwrite policy, so handles held by callers stay valid.
    """

    id: str
    type: str
    attributes: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "type": self.type, "attributes": self.attributes}


@dataclass(frozen=True, slots=True)
class Relationship:
    """A directed, labeled edge between two stored entities."""

    from_id: str
    to_id: str
    label: str

    @property
    def key(self) -> tuple[str, str, str]:
        return (self.from_id, self.to_id, self.label)

    def to_dict(self) -> dict[str, Any]:
        return {"from": self.from_id, "to": self.to_id, "label": self.label}
