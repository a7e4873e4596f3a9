from __future__ import annotations

from social_graph.sources.models import Post, User

USER_TYPE = "User"
POST_TYPE = "Post"
HAS_LABEL = "HAS"


def user_entity_id_for(user_id: int | str) -> str:
    return f"user:{user_id}"


def user_entity_id(user: User) -> str:
    """Stable graph key for a person.

    The kind prefix keeps people and posts with the same numeric id apart.
    """
    return user_entity_id_for(user.id)


def post_entity_id(post: Post) -> str:
    return f"post:{post.id}"
