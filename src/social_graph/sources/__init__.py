"""HTTP record sources for people (`/users`) and their posts (`/posts`)."""

from .client import FetchOutcome, ThirdPartyApiClient
from .models import Post, SourceRecord, User
from .posts import PostsApi
from .users import UsersApi

__all__ = ["FetchOutcome", "Post", "PostsApi", "SourceRecord", "ThirdPartyApiClient", "User", "UsersApi"]
