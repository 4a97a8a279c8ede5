import asyncio

import httpx

from post_aggregator.collectors.base import BaseCollector, Post
from post_aggregator.config import settings
from post_aggregator.errors import UpstreamError
from post_aggregator.utils.logging import get_logger

logger = get_logger(__name__)


class BlogPostCollector(BaseCollector):
    """Fetches posts from the upstream blog API, one request per tag."""

    def __init__(self, base_url: str | None = None, timeout: float | None = None):
        self.base_url = base_url or settings.upstream_url
        self.timeout = timeout if timeout is not None else settings.upstream_timeout_seconds

    async def fetch_tag(self, client: httpx.AsyncClient, tag: str) -> list[Post]:
        try:
            response = await client.get(self.base_url, params={"tag": tag})
        except httpx.HTTPError as exc:
            logger.warning("upstream_request_failed", tag=tag, error=str(exc))
            raise UpstreamError(f"Upstream request failed for tag '{tag}'") from exc

        if not response.is_success:
            logger.warning(
                "upstream_api_error",
                tag=tag,
                status_code=response.status_code,
            )
            raise UpstreamError(
                f"Upstream returned {response.status_code} for tag '{tag}'",
                status=response.status_code,
            )

        try:
            data = response.json()
            items = data["posts"]
            if not isinstance(items, list):
                raise TypeError("posts must be a list")
            posts = [Post.from_dict(item) for item in items]
        except (ValueError, KeyError, TypeError) as exc:
            logger.warning("upstream_payload_invalid", tag=tag, error=str(exc))
            raise UpstreamError(f"Upstream returned a malformed payload for tag '{tag}'") from exc

        logger.debug("upstream_tag_fetched", tag=tag, count=len(posts))
        return posts

    async def fetch_all(self, tags: tuple[str, ...] | list[str]) -> list[Post]:
        """
        Fetch every tag concurrently and concatenate the results.

        Each task returns its own list; lists are joined in tag order once all
        tasks finish. The first failure cancels the remaining tasks and is
        re-raised, so a partial merge is never returned.
        """
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            tasks = [asyncio.create_task(self.fetch_tag(client, tag)) for tag in tags]
            try:
                results = await asyncio.gather(*tasks)
            except Exception:
                for task in tasks:
                    task.cancel()
                await asyncio.gather(*tasks, return_exceptions=True)
                raise

        merged: list[Post] = []
        for posts in results:
            merged.extend(posts)
        return merged
