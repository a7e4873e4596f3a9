from __future__ import annotations

from .client import FetchOutcome, RecordCallback, ThirdPartyApiClient
from .models import User


class UsersApi(ThirdPartyApiClient):
    async def iterate_users(self, callback: RecordCallback[User]) -> FetchOutcome:
        return await self.iterate("/users", User, callback)
