from blog.db import db


class UserPost(db.Model):
    """Co-ownership of a post by one author."""

    __tablename__ = "user_posts"

    user_id = db.Column(
        db.Integer,
        db.ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )
    post_id = db.Column(
        db.Integer,
        db.ForeignKey("posts.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )

    def __repr__(self):
        return f"<UserPost user_id={self.user_id} post_id={self.post_id}>"
