import pytest

from post_aggregator.errors import (
    InvalidDirectionError,
    InvalidSortFieldError,
    MissingTagsError,
)
from post_aggregator.query import SortDirection, SortField, validate


def test_single_tag():
    query = validate("tech")
    assert query.tags == ("tech",)
    assert query.sort_field is None
    assert query.sort_direction is None


def test_tags_split_on_commas_literally():
    """Tags are not trimmed or case-folded."""
    query = validate("tech, History,")
    assert query.tags == ("tech", " History", "")


@pytest.mark.parametrize("raw_tags", [None, ""])
def test_missing_tags_rejected(raw_tags):
    with pytest.raises(MissingTagsError) as exc_info:
        validate(raw_tags, "reads", "desc")
    assert exc_info.value.status == 400
    assert exc_info.value.message == "Tags parameter is required"


def test_valid_sort_parameters():
    query = validate("tech", "popularity", "desc")
    assert query.sort_field is SortField.POPULARITY
    assert query.sort_direction is SortDirection.DESC


def test_invalid_sort_field_rejected():
    with pytest.raises(InvalidSortFieldError) as exc_info:
        validate("tech", "invalidfield")
    assert exc_info.value.status == 400


def test_tags_is_not_a_sortable_field():
    with pytest.raises(InvalidSortFieldError):
        validate("tech", "tags")


def test_invalid_direction_rejected():
    with pytest.raises(InvalidDirectionError) as exc_info:
        validate("tech", None, "sideways")
    assert exc_info.value.status == 400


def test_missing_tags_checked_before_sort_parameters():
    with pytest.raises(MissingTagsError):
        validate("", "invalidfield", "sideways")


def test_empty_sort_parameters_treated_as_absent():
    query = validate("tech", "", "")
    assert query.sort_field is None
    assert query.sort_direction is None
