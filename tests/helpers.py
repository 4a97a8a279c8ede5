import json
from pathlib import Path

from post_aggregator.collectors.base import Post

FIXTURES = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> dict:
    return json.loads((FIXTURES / name).read_text())


def make_post(
    id: int,
    reads: int = 0,
    likes: int = 0,
    popularity: float = 0.0,
    tags: tuple[str, ...] = ("tech",),
) -> Post:
    return Post(id=id, reads=reads, likes=likes, popularity=popularity, tags=tags)


class FakeCollector:
    """In-memory collector keyed by tag; records every tag requested."""

    def __init__(
        self,
        posts_by_tag: dict[str, list[Post]] | None = None,
        error: Exception | None = None,
    ):
        self.posts_by_tag = posts_by_tag or {}
        self.error = error
        self.requested: list[str] = []

    async def fetch_tag(self, client, tag: str) -> list[Post]:
        self.requested.append(tag)
        if self.error is not None:
            raise self.error
        return list(self.posts_by_tag.get(tag, []))

    async def fetch_all(self, tags) -> list[Post]:
        merged: list[Post] = []
        for tag in tags:
            merged.extend(await self.fetch_tag(None, tag))
        return merged
