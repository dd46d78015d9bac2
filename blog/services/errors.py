class PostError(Exception):
    pass


class InvalidArgument(PostError, ValueError):
    pass


class NotFound(PostError):
    pass


class Forbidden(PostError):
    pass


class StoreFailure(PostError):
    pass
