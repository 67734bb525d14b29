"""Document, author and search request models"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict


def to_utc(value: datetime) -> datetime:
    """Normalize a timestamp to UTC; naive values are taken as already UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UtcDatetime = Annotated[datetime, AfterValidator(to_utc)]


class Author(BaseModel):
    id: str
    name: str


class Document(BaseModel):
    """A stored unit of content. `id` is None until the store assigns one."""
    model_config = ConfigDict(validate_assignment=True)

    id: str | None = None
    title: str
    content: str
    author: Author
    created: UtcDatetime


class SearchRequest(BaseModel):
    """Query over stored documents; None or empty fields place no constraint."""
    model_config = ConfigDict(frozen=True)

    title_prefixes:    tuple[str, ...] | None = None
    contains_contents: tuple[str, ...] | None = None
    author_ids:        tuple[str, ...] | None = None
    created_from:      UtcDatetime | None = None     # inclusive
    created_to:        UtcDatetime | None = None     # inclusive
