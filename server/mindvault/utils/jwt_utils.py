# server/mindvault/utils/jwt_utils.py

import jwt
import secrets
import logging
from datetime import datetime, timedelta
from typing import Optional, Dict

from flask import current_app

logger = logging.getLogger(__name__)


class JWTManager:

    def __init__(self, secret_key: Optional[str] = None, expires: Optional[timedelta] = None, algorithm: Optional[str] = None):
        config = current_app.config if secret_key is None or expires is None or algorithm is None else {}

        self.secret_key = secret_key or config.get("SECRET_KEY")
        if not self.secret_key:
            raise ValueError("SECRET_KEY must be configured")

        self.algorithm = algorithm or config.get("JWT_ALGORITHM", "HS256")
        self.access_token_expires = expires or config.get("JWT_ACCESS_TOKEN_EXPIRES", timedelta(days=7))

    def generate_access_token(self, user_id: str, username: str) -> str:
        """Generate a session token embedding the user identity"""
        now = datetime.utcnow()
        payload = {
            "sub": user_id,
            "userId": user_id,
            "username": username,
            "iat": now,
            "exp": now + self.access_token_expires,
            "jti": secrets.token_urlsafe(16),
        }

        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def verify_access_token(self, token: str) -> Optional[Dict]:
        """Verify and decode a session token, None when it cannot be trusted"""
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                options={"require": ["exp", "sub"]}
            )

            if not payload.get("userId") or payload.get("userId") != payload.get("sub"):
                logger.debug("Token identity claims do not match")
                return None

            return payload

        except jwt.ExpiredSignatureError:
            logger.debug("Token expired")
            return None
        except jwt.InvalidTokenError as e:
            logger.debug(f"Invalid token: {e}")
            return None

