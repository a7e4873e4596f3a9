from __future__ import annotations

import pytest

from social_graph.graph import GraphStore

BASE_URL = "https://api.example.test"


def make_user(user_id: int, **overrides) -> dict:
    user = {
        "id": user_id,
        "name": f"User {user_id}",
        "username": f"user{user_id}",
        "email": f"user{user_id}@example.test",
        "address": {
            "street": "Kulas Light",
            "suite": "Apt. 556",
            "city": "Gwenborough",
            "zipcode": "92998-3874",
            "geo": {"lat": "-37.3159", "lng": "81.1496"},
        },
        "phone": "1-770-736-8031 x56442",
        "website": "hildegard.org",
        "company": {
            "name": "Romaguera-Crona",
            "catchPhrase": "Multi-layered client-server neural-net",
            "bs": "harness real-time e-markets",
        },
    }
    user.update(overrides)
    return user


def make_post(post_id: int, user_id: int, **overrides) -> dict:
    post = {"userId": user_id, "id": post_id, "title": f"title {post_id}", "body": "body"}
    post.update(overrides)
    return post


@pytest.fixture
def store() -> GraphStore:
    return GraphStore()
