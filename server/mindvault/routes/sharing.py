# server/mindvault/routes/sharing.py

import logging

from flask import Blueprint, current_app

from mindvault.extensions import db
from mindvault.services.share_service import ShareService
from mindvault.utils.auth import require_auth, get_current_user_id
from mindvault.utils.validators import get_json_body

sharing_bp = Blueprint("sharing", __name__)
logger = logging.getLogger(__name__)


def api_response():
    return current_app.api_response


def share_service() -> ShareService:
    return ShareService(db.session)


@sharing_bp.route("/share", methods=["POST"])
@require_auth
def toggle_share():
    user_id = get_current_user_id()
    data = get_json_body()

    if data.get("share"):
        share, created = share_service().enable(user_id)
        message = "Brain shared successfully" if created else "Brain is already shared"
        return api_response().success(data=share.to_dict(), message=message)

    share_service().disable(user_id)
    return api_response().success(message="Brain unshared successfully")


@sharing_bp.route("/share/status", methods=["GET"])
@require_auth
def share_status():
    return api_response().success(data=share_service().status(get_current_user_id()))


@sharing_bp.route("/<share_hash>", methods=["GET"])
def access_shared_brain(share_hash: str):
    snapshot = share_service().resolve(share_hash)
    return api_response().success(data=snapshot, message="Shared brain accessed successfully")
