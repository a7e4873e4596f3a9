"""Entity/relationship graph store.

This module provides:
- `Entity` / `Relationship` records keyed by string ids
- `GraphStore`, the in-memory aggregate that enforces id uniqueness and
  referential integrity of edges
- `check_integrity` for a post-run sanity pass
"""

from .errors import DuplicateEntityError, GraphStoreError, InvalidReferenceError
from .integrity import IntegrityReport, check_integrity
from .models import DuplicatePolicy, Entity, Relationship
from .store import GraphStore

__all__ = [
    "DuplicateEntityError",
    "DuplicatePolicy",
    "Entity",
    "GraphStore",
    "GraphStoreError",
    "IntegrityReport",
    "InvalidReferenceError",
    "Relationship",
    "check_integrity",
]
