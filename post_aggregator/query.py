"""
Query parameter validation.

All checks run before any upstream request is made.
"""

from dataclasses import dataclass
from enum import Enum

from post_aggregator.errors import (
    InvalidDirectionError,
    InvalidSortFieldError,
    MissingTagsError,
)


class SortField(str, Enum):
    ID = "id"
    READS = "reads"
    LIKES = "likes"
    POPULARITY = "popularity"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class Query:
    tags: tuple[str, ...]
    sort_field: SortField | None = None
    sort_direction: SortDirection | None = None


def validate(
    raw_tags: str | None,
    raw_sort_field: str | None = None,
    raw_direction: str | None = None,
) -> Query:
    """
    Turn raw query parameters into a Query.

    Empty strings for sortBy/direction count as not given. Tags are split on
    commas and kept exactly as written.
    """
    if not raw_tags:
        raise MissingTagsError()

    sort_field = None
    if raw_sort_field:
        try:
            sort_field = SortField(raw_sort_field)
        except ValueError:
            raise InvalidSortFieldError() from None

    sort_direction = None
    if raw_direction:
        try:
            sort_direction = SortDirection(raw_direction)
        except ValueError:
            raise InvalidDirectionError() from None

    return Query(
        tags=tuple(raw_tags.split(",")),
        sort_field=sort_field,
        sort_direction=sort_direction,
    )
