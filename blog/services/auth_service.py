from werkzeug.security import generate_password_hash, check_password_hash
from flask_jwt_extended import create_access_token, create_refresh_token

from blog.repositories import user_repository


def _require_non_empty_string(value):
    return isinstance(value, str) and value.strip()


def register(username, password):
    if not _require_non_empty_string(username) or not _require_non_empty_string(password):
        raise ValueError("Missing fields")

    username = username.strip()

    if user_repository.get_by_username(username):
        raise ValueError("Username already exists")

    return user_repository.create_user(
        username=username,
        password_hash=generate_password_hash(password),
    )


def login(username, password):
    if not _require_non_empty_string(username) or not _require_non_empty_string(password):
        raise ValueError("Invalid credentials")

    username = username.strip()

    user = user_repository.get_by_username(username)
    if not user or not check_password_hash(user.password_hash, password):
        raise ValueError("Invalid credentials")

    return {
        "access_token": create_access_token(identity=username),
        "refresh_token": create_refresh_token(identity=username)
    }


def refresh_access_token(username):
    return {
        "access_token": create_access_token(identity=username)
    }


def resolve_user(username):
    """Map a token identity back to its user, or None if it no longer exists."""
    if not _require_non_empty_string(username):
        return None
    return user_repository.get_by_username(username)
