"""Plan and apply changes to a post's author set.

``reconcile_authors`` is pure: it only computes which links to add and
which to remove. ``apply_author_change`` writes that plan through the store
and must run inside the caller's ``PostRepository.transaction()``.
"""

import logging
from dataclasses import dataclass

from blog.services.errors import InvalidArgument

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthorSetChange:
    to_add: frozenset = frozenset()
    to_remove: frozenset = frozenset()

    @property
    def is_empty(self) -> bool:
        return not self.to_add and not self.to_remove


def reconcile_authors(current, target) -> AuthorSetChange:
    current = frozenset(current)
    target = frozenset(target)

    # a post always keeps at least one author
    if not target:
        raise InvalidArgument("authorIds must not be empty")

    return AuthorSetChange(
        to_add=target - current,
        to_remove=current - target,
    )


def apply_author_change(store, post_id: int, change: AuthorSetChange) -> None:
    if change.is_empty:
        return

    if change.to_add:
        store.insert_links((user_id, post_id) for user_id in sorted(change.to_add))
    if change.to_remove:
        store.delete_links(post_id, sorted(change.to_remove))

    logger.info(
        "Reconciled authors of post %s: added=%s removed=%s",
        post_id,
        sorted(change.to_add),
        sorted(change.to_remove),
    )
