from blog.extensions.extensions import ma


class PostResponseSchema(ma.Schema):
    id = ma.Integer()
    text = ma.String()
    tags = ma.List(ma.String())
    reads = ma.Integer()
    likes = ma.Integer()
    popularity = ma.Integer()
