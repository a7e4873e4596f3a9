from .ingest import GraphIngestor, IngestStats, build_graph
from .keys import HAS_LABEL, POST_TYPE, USER_TYPE, post_entity_id, user_entity_id

__all__ = [
    "GraphIngestor",
    "HAS_LABEL",
    "IngestStats",
    "POST_TYPE",
    "USER_TYPE",
    "build_graph",
    "post_entity_id",
    "user_entity_id",
]
