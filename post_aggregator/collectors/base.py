import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

import httpx


def _integer(data: dict, key: str) -> int:
    value = data[key]
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{key} must be an integer")
    return value


def _score(data: dict, key: str) -> float:
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{key} must be a number")
    if not math.isfinite(value):
        raise ValueError(f"{key} must be finite")
    return float(value)


@dataclass(frozen=True)
class Post:
    """A blog post as returned by the upstream API."""
    id: int
    reads: int
    likes: int
    popularity: float
    tags: tuple[str, ...] = field(default_factory=tuple)
    author: str = ""
    author_id: int | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "Post":
        """
        Build a Post from one upstream record.

        Raises KeyError, TypeError or ValueError when the record is not an
        object, a required field is missing, or a counter is not a number.
        """
        if not isinstance(data, dict):
            raise TypeError("post must be an object")
        tags = data.get("tags") or []
        if not isinstance(tags, list):
            raise TypeError("tags must be a list")
        return cls(
            id=_integer(data, "id"),
            reads=_integer(data, "reads"),
            likes=_integer(data, "likes"),
            popularity=_score(data, "popularity"),
            tags=tuple(str(t) for t in tags),
            author=data.get("author", ""),
            author_id=data.get("authorId"),
        )

    def to_dict(self) -> dict:
        return {
            "author": self.author,
            "authorId": self.author_id,
            "id": self.id,
            "likes": self.likes,
            "popularity": self.popularity,
            "reads": self.reads,
            "tags": list(self.tags),
        }


class BaseCollector(ABC):
    """Abstract base for tag-scoped post sources."""

    @abstractmethod
    async def fetch_tag(self, client: httpx.AsyncClient, tag: str) -> list[Post]:
        """Fetch every post for a single tag. Raises UpstreamError on failure."""
        ...

    @abstractmethod
    async def fetch_all(self, tags: tuple[str, ...] | list[str]) -> list[Post]:
        """Fetch all tags concurrently and concatenate results in tag order."""
        ...
