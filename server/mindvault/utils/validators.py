# server/mindvault/utils/validators.py

import re
from typing import Optional, Tuple

from flask import current_app, request

from mindvault.errors import ValidationError
from mindvault.models.content import ContentType


def get_json_body() -> dict:
    """Return the request JSON object, or an empty dict when there is no body"""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Invalid JSON body")
    return data


class InputValidator:
    MAX_USERNAME_LENGTH = 100
    MAX_PASSWORD_BYTES = 72

    MAX_FOLDER_NAME_LENGTH = 100
    MAX_DESCRIPTION_LENGTH = 255
    MAX_TITLE_LENGTH = 255

    COLOR_REGEX = re.compile(r'^#(?:[0-9a-fA-F]{3}){1,2}$')

    @classmethod
    def validate_credentials(cls, username, password) -> Tuple[bool, Optional[str], Optional[str]]:
        if not username or not password:
            return False, None, "Username and password are required"

        if not isinstance(password, str):
            return False, None, "Password must be a string"

        username = str(username).strip()
        if not username:
            return False, None, "Username and password are required"

        if len(username) > cls.MAX_USERNAME_LENGTH:
            return False, None, f"Username is too long (max {cls.MAX_USERNAME_LENGTH} characters)"

        return True, username, None

    @classmethod
    def validate_password(cls, password: str) -> Tuple[bool, Optional[str]]:
        min_length = current_app.config.get("MIN_PASSWORD_LENGTH", 6)

        if not password:
            return False, "Password is required"

        if len(password) < min_length:
            return False, f"Password must be at least {min_length} characters long"

        # bcrypt only accepts 72 bytes of input
        if len(password.encode("utf-8")) > cls.MAX_PASSWORD_BYTES:
            return False, f"Password is too long (max {cls.MAX_PASSWORD_BYTES} bytes)"

        return True, None

    @staticmethod
    def validate_id(value) -> Tuple[bool, Optional[str]]:
        if value is not None and not isinstance(value, str):
            return False, "Invalid id"
        return True, None

    @classmethod
    def validate_folder_name(cls, name) -> Tuple[bool, Optional[str], Optional[str]]:
        if not name or not isinstance(name, str) or not name.strip():
            return False, None, "Folder name is required"

        name = name.strip()
        if len(name) > cls.MAX_FOLDER_NAME_LENGTH:
            return False, None, f"Folder name is too long (max {cls.MAX_FOLDER_NAME_LENGTH} characters)"

        return True, name, None

    @classmethod
    def validate_description(cls, description) -> Tuple[bool, str, Optional[str]]:
        if not description:
            return True, "", None

        description = str(description).strip()
        if len(description) > cls.MAX_DESCRIPTION_LENGTH:
            return False, "", f"Description is too long (max {cls.MAX_DESCRIPTION_LENGTH} characters)"

        return True, description, None

    @classmethod
    def validate_color(cls, color) -> Tuple[bool, Optional[str], Optional[str]]:
        if not color:
            return True, None, None

        color = str(color).strip()
        if not cls.COLOR_REGEX.match(color):
            return False, None, "Color must be a hex value such as #3B82F6"

        return True, color, None


class ContentValidator:

    @staticmethod
    def parse_type(value) -> Tuple[bool, Optional[ContentType], Optional[str]]:
        if not value:
            return False, None, "Type is required"

        try:
            return True, ContentType(str(value).strip().lower()), None
        except ValueError:
            supported = ", ".join(ContentType.values())
            return False, None, f"Invalid content type. Supported types: {supported}"

    @staticmethod
    def validate_title(title) -> Tuple[bool, Optional[str], Optional[str]]:
        if not title or not str(title).strip():
            return False, None, "Title is required"

        title = str(title).strip()
        if len(title) > InputValidator.MAX_TITLE_LENGTH:
            return False, None, f"Title is too long (max {InputValidator.MAX_TITLE_LENGTH} characters)"

        return True, title, None

    @staticmethod
    def validate_payload(
        content_type: ContentType,
        text: Optional[str],
        link: Optional[str]
    ) -> Tuple[bool, Optional[str], Optional[str]]:
        """Check the text/link rule for a content type and return the kept value"""
        if content_type.requires_text:
            if not text or not str(text).strip():
                return False, None, "Text content is required for text type"
            return True, str(text), None

        if not link or not str(link).strip():
            return False, None, "Link is required for this content type"
        return True, str(link).strip(), None
