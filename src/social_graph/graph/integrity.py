from __future__ import annotations

from dataclasses import dataclass, field

from .store import GraphStore


@dataclass(slots=True)
class IntegrityReport:
    entities: int
    relationships: int
    dangling: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.dangling


def check_integrity(store: GraphStore) -> IntegrityReport:
    """Confirm every relationship endpoint still resolves to a stored entity.

    `dangling` lists one human-readable line per broken endpoint.
    """
    relationships = store.relationships()
    report = IntegrityReport(entities=store.entity_count, relationships=len(relationships))
    for i, rel in enumerate(relationships):
        for end, entity_id in (("from", rel.from_id), ("to", rel.to_id)):
            if store.find_entity_by_id(entity_id) is None:
                report.dangling.append(f"#{i} {rel.label} {end}={entity_id}")
    return report
