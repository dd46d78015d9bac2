import logging
from contextlib import contextmanager

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError

from blog.models.post_model import Post
from blog.models.user_model import User
from blog.models.user_post_model import UserPost
from blog.services.errors import StoreFailure

logger = logging.getLogger(__name__)


class PostRepository:
    """Posts and their author links, over one SQLAlchemy session.

    Reads run inside ``reading()``. Writes only flush; nothing is committed
    until the enclosing ``transaction()`` block exits cleanly.
    """

    def __init__(self, session):
        self.session = session

    @contextmanager
    def transaction(self):
        try:
            yield self
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.exception("Post store write failed, rolled back")
            raise StoreFailure("Post storage failed") from e
        except Exception:
            self.session.rollback()
            raise

    @contextmanager
    def reading(self):
        try:
            yield self
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.exception("Post store read failed")
            raise StoreFailure("Post storage failed") from e

    def get_post(self, post_id: int) -> Post | None:
        return self.session.get(Post, post_id)

    def lock_post(self, post_id: int) -> Post | None:
        """Load a post holding its write lock until the transaction ends."""
        if self.session.connection().dialect.name == "sqlite":
            # no row locks in SQLite; a no-op write takes the database write lock
            self.session.execute(
                update(Post)
                .where(Post.id == post_id)
                .values(id=Post.id)
                .execution_options(synchronize_session=False)
            )
            return self.session.get(Post, post_id, populate_existing=True)
        return self.session.get(
            Post, post_id, with_for_update=True, populate_existing=True
        )

    def get_posts(self, post_ids) -> list[Post]:
        post_ids = list(post_ids)
        if not post_ids:
            return []
        result = self.session.execute(
            select(Post).where(Post.id.in_(post_ids)).order_by(Post.id.asc())
        )
        return list(result.scalars())

    def create_post(self, text: str, tags=None) -> Post:
        post = Post(text=text)
        post.tags = tags or []
        self.session.add(post)
        self.session.flush()
        return post

    def save_post(self, post: Post) -> Post:
        self.session.add(post)
        self.session.flush()
        return post

    def get_links_by_post_id(self, post_id: int) -> list[UserPost]:
        result = self.session.execute(
            select(UserPost)
            .where(UserPost.post_id == post_id)
            .order_by(UserPost.user_id.asc())
        )
        return list(result.scalars())

    def get_links_by_author_ids(self, author_ids) -> list[UserPost]:
        author_ids = list(author_ids)
        if not author_ids:
            return []
        result = self.session.execute(
            select(UserPost)
            .where(UserPost.user_id.in_(author_ids))
            .order_by(UserPost.post_id.asc(), UserPost.user_id.asc())
        )
        return list(result.scalars())

    def insert_links(self, pairs) -> None:
        """Insert ``(user_id, post_id)`` pairs."""
        links = [UserPost(user_id=user_id, post_id=post_id) for user_id, post_id in pairs]
        if not links:
            return
        self.session.add_all(links)
        self.session.flush()

    def delete_links(self, post_id: int, user_ids) -> None:
        user_ids = list(user_ids)
        if not user_ids:
            return
        self.session.execute(
            delete(UserPost)
            .where(
                UserPost.post_id == post_id,
                UserPost.user_id.in_(user_ids),
            )
            .execution_options(synchronize_session="fetch")
        )
        self.session.flush()

    def is_author(self, user_id: int, post_id: int) -> bool:
        return self.session.get(UserPost, (user_id, post_id)) is not None

    def get_existing_user_ids(self, user_ids) -> set[int]:
        user_ids = list(user_ids)
        if not user_ids:
            return set()
        result = self.session.execute(select(User.id).where(User.id.in_(user_ids)))
        return set(result.scalars())
