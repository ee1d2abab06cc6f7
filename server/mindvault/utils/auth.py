# server/mindvault/utils/auth.py

import logging
from functools import wraps
from typing import Optional

from flask import request, g

from mindvault.extensions import db
from mindvault.services.identity_service import IdentityService

logger = logging.getLogger(__name__)


def extract_token_from_header() -> Optional[str]:
    """Extract Bearer token from Authorization header"""
    auth_header = request.headers.get("Authorization", "")

    if auth_header.lower().startswith("bearer "):
        return auth_header[7:].strip() or None

    return None


def require_auth(f):
    """Decorator that requires a valid token and scopes the request to its user"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        identity = IdentityService(db.session).verify_token(extract_token_from_header())

        g.current_user_id = identity["userId"]
        g.current_username = identity["username"]
        g.identity = identity

        return f(*args, **kwargs)

    return decorated_function


def get_current_user_id() -> Optional[str]:
    """Get current authenticated user ID from request context"""
    return getattr(g, "current_user_id", None)


def get_identity() -> Optional[dict]:
    return getattr(g, "identity", None)
