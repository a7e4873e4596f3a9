from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field

from social_graph.graph import GraphStore
from social_graph.settings import SocialGraphSettings, settings as default_settings
from social_graph.sources import PostsApi, UsersApi
from social_graph.sources.models import Post, User

from .keys import (
    HAS_LABEL,
    POST_TYPE,
    USER_TYPE,
    post_entity_id,
    user_entity_id,
    user_entity_id_for,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class IngestStats:
    users: int = 0
    posts: int = 0
    relationships: int = 0
    orphan_posts: int = 0
    failed_sources: list[str] = field(default_factory=list)
    users_ms: float = 0.0
    posts_ms: float = 0.0


class GraphIngestor:
    """Pulls people, then posts, into a `GraphStore`.

    People are ingested completely before the first post is requested, so
    every post can be wired to an author that the source actually listed.
    """

    def __init__(self, store: GraphStore, users_api: UsersApi, posts_api: PostsApi):
        self.store = store
        self.users_api = users_api
        self.posts_api = posts_api
        self.stats = IngestStats()

    async def run(self) -> IngestStats:
        self.stats = IngestStats()

        t0 = time.perf_counter()
        outcome = await self.users_api.iterate_users(self._on_user)
        if not outcome.ok:
            self.stats.failed_sources.append(outcome.path)
        t1 = time.perf_counter()
        outcome = await self.posts_api.iterate_posts(self._on_post)
        if not outcome.ok:
            self.stats.failed_sources.append(outcome.path)
        t2 = time.perf_counter()

        self.stats.users_ms = (t1 - t0) * 1000.0
        self.stats.posts_ms = (t2 - t1) * 1000.0
        logger.info(
            "Ingested %d users, %d posts, %d relationships (%d orphan posts)",
            self.stats.users,
            self.stats.posts,
            self.stats.relationships,
            self.stats.orphan_posts,
        )
        return self.stats

    async def _on_user(self, user: User) -> None:
        self.store.create_entity(user_entity_id(user), USER_TYPE, user.payload())
        self.stats.users += 1

    async def _on_post(self, post: Post) -> None:
        post_entity = self.store.create_entity(post_entity_id(post), POST_TYPE, post.payload())
        self.stats.posts += 1

        user_entity = self.store.find_entity_by_id(user_entity_id_for(post.user_id))
        if user_entity is None:
            self.stats.orphan_posts += 1
            logger.debug("Post %s has no known author user:%s", post.id, post.user_id)
            return
        # Re-ingesting the same listing must not grow the edge list.
        if self.store.has_relationship(user_entity, post_entity, HAS_LABEL):
            return
        self.store.create_relationship(user_entity, post_entity, HAS_LABEL)
        self.stats.relationships += 1


async def build_graph(
    cfg: SocialGraphSettings | None = None, store: GraphStore | None = None
) -> tuple[GraphStore, IngestStats]:
    """Run one ingestion against the configured API and return the graph."""
    cfg = cfg or default_settings
    store = store if store is not None else GraphStore(cfg.duplicate_policy)

    opts = {
        "page_size": cfg.page_size,
        "max_pages": cfg.max_pages,
        "attempts": cfg.fetch_attempts,
    }
    users_api = UsersApi(cfg.base_url, **opts)
    posts_api = PostsApi(cfg.base_url, **opts)
    try:
        stats = await GraphIngestor(store, users_api, posts_api).run()
    finally:
        await users_api.aclose()
        await posts_api.aclose()
    return store, stats
