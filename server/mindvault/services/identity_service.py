# server/mindvault/services/identity_service.py

import logging
from typing import Optional, Dict

from sqlalchemy.exc import IntegrityError

from mindvault.errors import AuthError, ConflictError, ValidationError
from mindvault.models.user import User
from mindvault.utils.jwt_utils import JWTManager
from mindvault.utils.validators import InputValidator

logger = logging.getLogger(__name__)


class IdentityService:
    """Credentials and session tokens"""

    def __init__(self, session, jwt_manager: Optional[JWTManager] = None):
        self.session = session
        self.jwt_manager = jwt_manager or JWTManager()

    def register(self, username: str, password: str) -> Dict:
        is_valid, clean_username, error = InputValidator.validate_credentials(username, password)
        if not is_valid:
            raise ValidationError(error)

        is_valid, error = InputValidator.validate_password(password)
        if not is_valid:
            raise ValidationError(error)

        if self.session.query(User).filter_by(username=clean_username).first():
            raise ConflictError("Username already exists", code="USERNAME_TAKEN")

        user = User(username=clean_username, password=password)
        self.session.add(user)

        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            raise ConflictError("Username already exists", code="USERNAME_TAKEN")

        logger.info(f"User registered: {user.id}")

        return self._session_for(user)

    def authenticate(self, username: str, password: str) -> Dict:
        is_valid, clean_username, error = InputValidator.validate_credentials(username, password)
        if not is_valid:
            raise ValidationError(error)

        user = self.session.query(User).filter_by(username=clean_username).first()

        # Same error for unknown user and wrong password
        if not user or not user.check_password(password):
            logger.warning("Failed sign-in attempt")
            raise AuthError.bad_credentials()

        logger.info(f"User signed in: {user.id}")

        return self._session_for(user)

    def verify_token(self, token: Optional[str]) -> Dict:
        """Resolve a bearer token into the identity it carries"""
        if not token:
            raise AuthError.missing()

        payload = self.jwt_manager.verify_access_token(token)
        if not payload:
            raise AuthError.invalid()

        user = self.session.get(User, payload["userId"])
        if not user:
            raise AuthError.invalid()

        return {
            "userId": user.id,
            "username": user.username,
        }

    def _session_for(self, user: User) -> Dict:
        return {
            "token": self.jwt_manager.generate_access_token(user.id, user.username),
            "user": user.to_dict(),
        }
