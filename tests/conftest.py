import pytest

from post_aggregator.collectors.base import Post
from tests.helpers import load_fixture


@pytest.fixture
def fixture_posts() -> dict[str, list[Post]]:
    return {
        "tech": [Post.from_dict(p) for p in load_fixture("blog_posts_tech.json")["posts"]],
        "history": [Post.from_dict(p) for p in load_fixture("blog_posts_history.json")["posts"]],
    }
