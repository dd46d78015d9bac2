from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required, get_jwt_identity

from blog.db import db
from blog.repositories.post_repository import PostRepository
from blog.services import auth_service
from blog.services.errors import Forbidden, InvalidArgument, NotFound, StoreFailure
from blog.services.post_query_service import list_posts
from blog.services.post_service import create_post, update_post
from blog.services.validation import parse_id_list

post_bp = Blueprint("posts", __name__)


def _current_user():
    return auth_service.resolve_user(get_jwt_identity())


@post_bp.route("/posts", methods=["POST"])
@jwt_required()
def create_post_route():
    user = _current_user()
    if not user:
        return jsonify({"error": "Log in required"}), 401

    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Invalid JSON body"}), 400

    if not data.get("text"):
        return jsonify({"error": "Must provide text for the new post"}), 400

    try:
        post = create_post(
            PostRepository(db.session),
            data.get("text"),
            data.get("tags"),
            author_id=user.id,
        )
        return jsonify({"post": post}), 200
    except InvalidArgument as e:
        return jsonify({"error": str(e)}), 400
    except StoreFailure as e:
        return jsonify({"error": str(e)}), 503


@post_bp.route("/posts", methods=["GET"])
@jwt_required()
def list_posts_route():
    if not _current_user():
        return jsonify({"error": "Log in required"}), 401

    try:
        author_ids = parse_id_list(request.args.get("authorIds"), field="authorIds")
        posts = list_posts(
            PostRepository(db.session),
            author_ids,
            sort_by=request.args.get("sortBy") or "id",
            direction=request.args.get("direction") or "asc",
        )
        return jsonify({"posts": posts}), 200
    except InvalidArgument as e:
        return jsonify({"error": str(e)}), 400
    except StoreFailure as e:
        return jsonify({"error": str(e)}), 503


@post_bp.route("/posts/<post_id>", methods=["PATCH"])
@jwt_required()
def update_post_route(post_id):
    user = _current_user()
    if not user:
        return jsonify({"error": "Log in required"}), 401

    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Invalid JSON body"}), 400

    try:
        post = update_post(PostRepository(db.session), post_id, user.id, data)
        return jsonify({"post": post}), 200
    except InvalidArgument as e:
        return jsonify({"error": str(e)}), 400
    except Forbidden as e:
        return jsonify({"error": str(e)}), 403
    except NotFound as e:
        return jsonify({"error": str(e)}), 404
    except StoreFailure as e:
        return jsonify({"error": str(e)}), 503
