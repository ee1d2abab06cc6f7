# server/mindvault/routes/auth.py

import logging

from flask import Blueprint, current_app

from mindvault.extensions import db
from mindvault.services.identity_service import IdentityService
from mindvault.utils.auth import require_auth, get_identity
from mindvault.utils.validators import get_json_body

logger = logging.getLogger(__name__)

auth_bp = Blueprint("auth", __name__)


def api_response():
    return current_app.api_response


@auth_bp.route("/signup", methods=["POST"])
def signup():
    """Register a new user and start a session"""
    data = get_json_body()

    session = IdentityService(db.session).register(
        data.get("username"),
        data.get("password")
    )

    return api_response().success(session, "User signed up successfully", 201)


@auth_bp.route("/signin", methods=["POST"])
def signin():
    data = get_json_body()

    session = IdentityService(db.session).authenticate(
        data.get("username"),
        data.get("password")
    )

    return api_response().success(session, "Login successful")


@auth_bp.route("/validate-token", methods=["POST"])
@require_auth
def validate_token():
    return api_response().success({"user": get_identity()}, "Token is valid")
