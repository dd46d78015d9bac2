import logging

from blog.schemas.post_schema import PostResponseSchema
from blog.services.errors import Forbidden, InvalidArgument, NotFound
from blog.services.reconciliation import apply_author_change, reconcile_authors
from blog.services.validation import (
    validate_identifier,
    validate_non_empty_string,
    validate_positive_integers,
    validate_tags,
)

logger = logging.getLogger(__name__)


def _serialize_post(post, author_ids):
    payload = PostResponseSchema().dump(post)
    payload["authorIds"] = list(author_ids)
    return payload


def _current_author_ids(store, post_id: int) -> list[int]:
    return [link.user_id for link in store.get_links_by_post_id(post_id)]


def is_post_author(store, requester_id, post_id) -> bool:
    if requester_id is None or post_id is None:
        return False
    with store.reading():
        return store.is_author(requester_id, post_id)


def create_post(store, text, tags=None, *, author_id):
    text = validate_non_empty_string(text, field="text")
    tags = validate_tags(tags) if tags else []
    author_id = validate_identifier(author_id, field="authorId")

    with store.transaction():
        post = store.create_post(text, tags)
        store.insert_links([(author_id, post.id)])
        post_id = post.id

    logger.info("Created post %s for author %s", post_id, author_id)
    with store.reading():
        return _serialize_post(store.get_post(post_id), [author_id])


def _validate_patch(store, patch):
    """Return the cleaned patch fields, or raise before anything is written."""
    if not isinstance(patch, dict):
        raise InvalidArgument("Invalid JSON body")

    cleaned = {}
    if "authorIds" in patch:
        author_ids = validate_positive_integers(patch["authorIds"], field="authorIds")
        missing = set(author_ids) - store.get_existing_user_ids(author_ids)
        if missing:
            raise InvalidArgument(
                f"Unknown authorIds: {', '.join(str(i) for i in sorted(missing))}"
            )
        cleaned["author_ids"] = set(author_ids)
    if "text" in patch:
        cleaned["text"] = validate_non_empty_string(patch["text"], field="text")
    if "tags" in patch:
        cleaned["tags"] = validate_tags(patch["tags"])
    return cleaned


def update_post(store, post_id, requester_id, patch):
    """Apply ``patch`` to a post the requester co-authors.

    ``patch`` may carry ``text``, ``tags`` (replaces the existing list) and
    ``authorIds`` (the complete target author set). The post row is locked
    for the duration so concurrent updates of one post apply in sequence.

    Raises:
        NotFound: the post does not exist.
        Forbidden: the requester is not one of its authors.
        InvalidArgument: a patch field is malformed, or ``authorIds`` is
            empty or names unknown users.
        StoreFailure: the database write failed; nothing was applied.
    """
    post_id = validate_identifier(post_id, field="postId")

    with store.transaction():
        post = store.lock_post(post_id)
        if post is None:
            raise NotFound("Post not found")

        if requester_id is None or not store.is_author(requester_id, post_id):
            logger.warning(
                "User %s attempted to edit post %s without authorship",
                requester_id,
                post_id,
            )
            raise Forbidden("You are not authorized to edit this post")

        cleaned = _validate_patch(store, patch)

        if "author_ids" in cleaned:
            change = reconcile_authors(
                _current_author_ids(store, post_id), cleaned["author_ids"]
            )
            apply_author_change(store, post_id, change)

        changed = False
        if "text" in cleaned and cleaned["text"] != post.text:
            post.text = cleaned["text"]
            changed = True
        if "tags" in cleaned and cleaned["tags"] != post.tags:
            post.tags = cleaned["tags"]
            changed = True

        if changed:
            store.save_post(post)

        payload = _serialize_post(post, _current_author_ids(store, post_id))

    return payload
