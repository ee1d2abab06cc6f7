# server/mindvault/routes/content.py

import logging

from flask import Blueprint, request, current_app

from mindvault.extensions import db
from mindvault.services.content_service import ContentService
from mindvault.utils.auth import require_auth, get_current_user_id
from mindvault.utils.validators import get_json_body

content_bp = Blueprint("content", __name__)
logger = logging.getLogger(__name__)


def api_response():
    return current_app.api_response


def content_service() -> ContentService:
    return ContentService(db.session)


@content_bp.route("", methods=["POST"])
@require_auth
def create_content():
    user_id = get_current_user_id()
    data = get_json_body()

    content = content_service().create(
        user_id,
        content_type=data.get("type"),
        title=data.get("title"),
        text=data.get("text"),
        link=data.get("link"),
        folder_id=data.get("folderId"),
    )

    return api_response().success(
        data={"content": content.to_dict(include_folder=False)},
        message="Content added successfully"
    )


@content_bp.route("", methods=["GET"])
@require_auth
def list_content():
    user_id = get_current_user_id()
    folder_id = request.args.get("folderId")

    contents = content_service().list(user_id, folder_id)

    return api_response().success(data={
        "contents": [content.to_dict() for content in contents]
    })


@content_bp.route("/<content_id>", methods=["PUT"])
@require_auth
def update_content(content_id: str):
    user_id = get_current_user_id()
    data = get_json_body()

    fields = {key: data[key] for key in ("type", "title", "text", "link") if key in data}
    fields["folder_id"] = data.get("folderId")

    content = content_service().update(user_id, content_id, fields)

    return api_response().success(
        data={"content": content.to_dict(include_folder=False)},
        message="Content updated successfully"
    )


@content_bp.route("/<content_id>", methods=["DELETE"])
@require_auth
def delete_content(content_id: str):
    content_service().delete(get_current_user_id(), content_id)
    return api_response().success(message="Content deleted successfully")


@content_bp.route("", methods=["DELETE"])
@require_auth
def delete_content_by_body():
    data = get_json_body()
    content_service().delete(get_current_user_id(), data.get("id"))
    return api_response().success(message="Content deleted successfully")
