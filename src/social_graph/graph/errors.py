from __future__ import annotations


class GraphStoreError(Exception):
    """Base class for graph store contract violations."""


class DuplicateEntityError(GraphStoreError):
    """An entity id was created twice while the store rejects duplicates."""

    def __init__(self, entity_id: str):
        super().__init__(f"Entity already exists: {entity_id}")
        self.entity_id = entity_id


class InvalidReferenceError(GraphStoreError):
    """A relationship endpoint was not obtained from this store."""

    def __init__(self, entity_id: str, reason: str = "not held by this store"):
        super().__init__(f"Invalid relationship endpoint {entity_id}: {reason}")
        self.entity_id = entity_id
