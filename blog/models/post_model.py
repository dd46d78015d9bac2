from datetime import datetime

from blog.db import db

TAG_DELIMITER = ","


class Post(db.Model):
    __tablename__ = "posts"

    id = db.Column(db.Integer, primary_key=True)
    text = db.Column(db.Text, nullable=False)
    # comma-joined; read and written through the ``tags`` property
    _tags = db.Column("tags", db.Text, nullable=False, default="")
    reads = db.Column(db.Integer, nullable=False, default=0)
    likes = db.Column(db.Integer, nullable=False, default=0)
    popularity = db.Column(db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    @property
    def tags(self) -> list[str]:
        if not self._tags:
            return []
        return self._tags.split(TAG_DELIMITER)

    @tags.setter
    def tags(self, values):
        values = list(values or [])
        if any(TAG_DELIMITER in value for value in values):
            raise ValueError(f"Tags must not contain '{TAG_DELIMITER}'")
        self._tags = TAG_DELIMITER.join(values)
