from typing import Iterable

from post_aggregator.collectors.base import Post
from post_aggregator.query import SortDirection, SortField

_DEFAULT_FIELD = SortField.ID
_DEFAULT_DIRECTION = SortDirection.ASC


def resolve(
    sort_field: SortField | None,
    sort_direction: SortDirection | None,
) -> tuple[SortField, SortDirection]:
    """Fill in the defaults (id, asc) for whichever of the two is missing."""
    return sort_field or _DEFAULT_FIELD, sort_direction or _DEFAULT_DIRECTION


def sort_posts(
    posts: Iterable[Post],
    sort_field: SortField | None = None,
    sort_direction: SortDirection | None = None,
) -> list[Post]:
    """
    Return posts ordered numerically on the effective field.

    Posts with equal keys are ordered by id ascending in either direction.
    """
    field, direction = resolve(sort_field, sort_direction)

    # Python's sort is stable, also with reverse=True, so pre-sorting by id
    # fixes the order of ties.
    by_id = sorted(posts, key=lambda p: p.id)
    return sorted(
        by_id,
        key=lambda p: getattr(p, field.value),
        reverse=direction is SortDirection.DESC,
    )
