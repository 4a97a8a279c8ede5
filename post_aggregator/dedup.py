from typing import Iterable

from post_aggregator.collectors.base import Post


def dedupe(posts: Iterable[Post]) -> list[Post]:
    """Keep the first post seen for each id, preserving first-seen order."""
    seen_ids: set[int] = set()
    unique: list[Post] = []
    for post in posts:
        if post.id in seen_ids:
            continue
        seen_ids.add(post.id)
        unique.append(post)
    return unique
