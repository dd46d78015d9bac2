from operator import attrgetter

from blog.schemas.post_schema import PostResponseSchema
from blog.services.validation import (
    SORT_DIRECTIONS,
    SORT_FIELDS,
    validate_enum,
    validate_positive_integers,
)


def collect_posts(store, author_ids) -> list:
    """Posts linked to any of ``author_ids``, once each, by ascending id."""
    post_ids = dict.fromkeys(
        link.post_id for link in store.get_links_by_author_ids(author_ids)
    )
    return store.get_posts(post_ids)


def sort_posts(posts, sort_by: str, direction: str) -> list:
    # sorted() is stable and ``reverse`` keeps equal keys in their input
    # order, so ties stay in ascending id order for both directions.
    return sorted(posts, key=attrgetter(sort_by), reverse=direction == "desc")


def list_posts(store, author_ids, sort_by="id", direction="asc"):
    author_ids = validate_positive_integers(author_ids, field="authorIds")
    sort_by = validate_enum(sort_by, SORT_FIELDS, field="sortBy")
    direction = validate_enum(direction, SORT_DIRECTIONS, field="direction")

    with store.reading():
        posts = collect_posts(store, set(author_ids))
    return PostResponseSchema(many=True).dump(sort_posts(posts, sort_by, direction))
