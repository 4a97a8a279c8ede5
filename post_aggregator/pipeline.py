"""
Validate → Fetch → Dedup → Sort.

Validation failures are raised before any upstream request; an upstream
failure aborts the whole aggregation.
"""

from post_aggregator.collectors.base import BaseCollector, Post
from post_aggregator.collectors.blog import BlogPostCollector
from post_aggregator.dedup import dedupe
from post_aggregator.errors import AggregatorError
from post_aggregator.query import validate
from post_aggregator.sorting import resolve, sort_posts
from post_aggregator.utils.logging import get_logger

logger = get_logger(__name__)


async def handle(
    raw_tags: str | None,
    raw_sort_field: str | None = None,
    raw_direction: str | None = None,
    collector: BaseCollector | None = None,
) -> list[Post]:
    """Run one aggregation request and return the final ordered posts."""
    try:
        query = validate(raw_tags, raw_sort_field, raw_direction)
    except AggregatorError as exc:
        logger.info("posts_query_rejected", reason=exc.message, status=exc.status)
        raise

    collector = collector or BlogPostCollector()
    fetched = await collector.fetch_all(query.tags)
    unique = dedupe(fetched)
    posts = sort_posts(unique, query.sort_field, query.sort_direction)

    field, direction = resolve(query.sort_field, query.sort_direction)
    logger.info(
        "posts_aggregated",
        tags=list(query.tags),
        sort_by=field.value,
        direction=direction.value,
        fetched=len(fetched),
        returned=len(posts),
    )
    return posts
