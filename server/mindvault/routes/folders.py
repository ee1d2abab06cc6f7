# server/mindvault/routes/folders.py

import logging

from flask import Blueprint, request, current_app

from mindvault.extensions import db
from mindvault.services.folder_service import FolderService, ContentDisposition
from mindvault.utils.auth import require_auth, get_current_user_id
from mindvault.utils.validators import get_json_body

folders_bp = Blueprint("folders", __name__)
logger = logging.getLogger(__name__)


def api_response():
    return current_app.api_response


def folder_service() -> FolderService:
    return FolderService(db.session)


@folders_bp.route("", methods=["POST"])
@require_auth
def create_folder():
    user_id = get_current_user_id()
    data = get_json_body()

    folder = folder_service().create(
        user_id,
        data.get("name"),
        description=data.get("description"),
        color=data.get("color"),
    )

    return api_response().success(
        data={"folder": folder.to_dict()},
        message="Folder created successfully"
    )


@folders_bp.route("", methods=["GET"])
@require_auth
def get_folders():
    folders = folder_service().list(get_current_user_id())

    return api_response().success(data={
        "folders": [folder.to_dict(include_count=True) for folder in folders]
    })


@folders_bp.route("/<folder_id>", methods=["PUT"])
@require_auth
def update_folder(folder_id: str):
    user_id = get_current_user_id()
    data = get_json_body()

    folder = folder_service().update(
        user_id,
        folder_id,
        data.get("name"),
        description=data.get("description"),
        color=data.get("color"),
    )

    return api_response().success(
        data={"folder": folder.to_dict()},
        message="Folder updated successfully"
    )


@folders_bp.route("/<folder_id>", methods=["DELETE"])
@require_auth
def delete_folder(folder_id: str):
    disposition = ContentDisposition.from_query(request.args.get("moveContent"))

    affected = folder_service().delete(get_current_user_id(), folder_id, disposition)

    return api_response().success(
        data={"disposition": disposition.action, "affectedContent": affected},
        message="Folder deleted successfully"
    )
