from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr


class SourceRecord(BaseModel):
    """A listing item, validated only as far as graph identity needs.

    Every other field is carried untouched; `payload()` returns the dict
    exactly as the source sent it.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    _raw: dict[str, Any] = PrivateAttr(default_factory=dict)

    @classmethod
    def from_payload(cls, raw: dict[str, Any]):
        record = cls.model_validate(raw)
        record._raw = raw
        return record

    def payload(self) -> dict[str, Any]:
        return self._raw


class User(SourceRecord):
    """A person.

    Upstream shape: id, name, username, email, address{street, suite, city,
    zipcode, geo{lat, lng}}, phone, website, company{name, catchPhrase, bs}.
    """

    id: int | str


class Post(SourceRecord):
    """A short post: id, userId, title, body."""

    id: int | str
    user_id: int | str = Field(alias="userId")
