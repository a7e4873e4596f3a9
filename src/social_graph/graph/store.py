from __future__ import annotations

import logging
import threading
from collections import Counter
from typing import Any

from .errors import DuplicateEntityError, InvalidReferenceError
from .models import DuplicatePolicy, Entity, Relationship

logger = logging.getLogger(__name__)


class GraphStore:
    """In-memory entity/relationship graph.

    Entities are kept in an insertion-ordered dict keyed by id; relationships
    are an append-only list that references endpoints by id. Every public
    method runs under one re-entrant lock, so concurrent callbacks never
    observe a half-applied mutation.
    """

    def __init__(self, duplicate_policy: DuplicatePolicy | str = DuplicatePolicy.OVERWRITE):
        self.duplicate_policy = DuplicatePolicy(duplicate_policy)
        self._entities: dict[str, Entity] = {}
        self._relationships: list[Relationship] = []
        # (from_id, to_id, label) -> number of parallel edges
        self._edge_counts: Counter[tuple[str, str, str]] = Counter()
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Entities
    # ------------------------------------------------------------------

    def create_entity(self, id: str, type: str, attributes: dict[str, Any]) -> Entity:
        """Create the entity `id`, or overwrite it in place if it exists.

        Returns the stored handle. Under `DuplicatePolicy.REJECT` a repeated
        id raises `DuplicateEntityError` and leaves the store untouched.
        """
        if not isinstance(id, str) or not id:
            raise ValueError("entity id must be a non-empty string")
        if not isinstance(type, str) or not type:
            raise ValueError("entity type must be a non-empty string")
        if attributes is None:
            raise ValueError("entity attributes must not be None")

        with self._lock:
            existing = self._entities.get(id)
            if existing is None:
                entity = Entity(id=id, type=type, attributes=attributes)
                self._entities[id] = entity
                return entity

            if self.duplicate_policy is DuplicatePolicy.REJECT:
                raise DuplicateEntityError(id)

            logger.debug("Overwriting entity %s (%s -> %s)", id, existing.type, type)
            existing.type = type
            existing.attributes = attributes
            return existing

    def find_entity_by_id(self, id: str) -> Entity | None:
        return self._entities.get(id)

    def entities(self) -> list[Entity]:
        with self._lock:
            return list(self._entities.values())

    def entities_by_type(self, type: str) -> list[Entity]:
        with self._lock:
            return [e for e in self._entities.values() if e.type == type]

    @property
    def entity_count(self) -> int:
        return len(self._entities)

    # ------------------------------------------------------------------
    # Relationships
    # ------------------------------------------------------------------

    def create_relationship(self, from_entity: Entity, to_entity: Entity, label: str) -> Relationship:
        """Append a directed edge `from_entity -[label]-> to_entity`.

        Both endpoints must be handles returned by this store. Identical
        edges are not merged.
        """
        if not isinstance(label, str) or not label:
            raise ValueError("relationship label must be a non-empty string")

        with self._lock:
            self._check_handle(from_entity)
            self._check_handle(to_entity)
            rel = Relationship(from_id=from_entity.id, to_id=to_entity.id, label=label)
            self._relationships.append(rel)
            self._edge_counts[rel.key] += 1
            return rel

    def has_relationship(self, from_entity: Entity, to_entity: Entity, label: str) -> bool:
        return self._edge_counts[(from_entity.id, to_entity.id, label)] > 0

    def relationships(self) -> list[Relationship]:
        with self._lock:
            return list(self._relationships)

    def relationships_from(self, entity_id: str, label: str | None = None) -> list[Relationship]:
        with self._lock:
            return [
                r
                for r in self._relationships
                if r.from_id == entity_id and (label is None or r.label == label)
            ]

    @property
    def relationship_count(self) -> int:
        return len(self._relationships)

    def _check_handle(self, entity: Entity) -> None:
        if not isinstance(entity, Entity):
            raise TypeError(f"expected an Entity handle, got {entity.__class__.__name__}")
        stored = self._entities.get(entity.id)
        if stored is None:
            raise InvalidReferenceError(entity.id, "unknown id")
        if stored is not entity:
            raise InvalidReferenceError(entity.id, "handle belongs to another store")

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        with self._lock:
            return {
                "entities": [e.to_dict() for e in self._entities.values()],
                "relationships": [r.to_dict() for r in self._relationships],
            }

    def __len__(self) -> int:
        return len(self._entities)

    def __contains__(self, id: object) -> bool:
        return id in self._entities

    def __repr__(self) -> str:
        return (
            f"GraphStore(entities={self.entity_count}, "
            f"relationships={self.relationship_count}, "
            f"policy={self.duplicate_policy.value})"
        )
