from __future__ import annotations

from .client import FetchOutcome, RecordCallback, ThirdPartyApiClient
from .models import Post


class PostsApi(ThirdPartyApiClient):
    async def iterate_posts(self, callback: RecordCallback[Post]) -> FetchOutcome:
        return await self.iterate("/posts", Post, callback)
