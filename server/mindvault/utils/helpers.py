# server/mindvault/utils/helpers.py

import secrets
import string
from typing import Optional

ROOT_FOLDER_ALIASES = {"", "null", "root"}


class HashGenerator:
    ALLOWED_CHARS = string.ascii_letters + string.digits

    def __init__(self, length: int = 10):
        self.length = length

    def generate(self, length: Optional[int] = None) -> str:
        return "".join(secrets.choice(self.ALLOWED_CHARS) for _ in range(length or self.length))


def is_root_folder_filter(value: Optional[str]) -> bool:
    """Whether a folderId query value selects unfiled content"""
    return value is not None and value.strip().lower() in ROOT_FOLDER_ALIASES


def mask_token(token: str) -> str:
    if not token or len(token) <= 8:
        return "***"
    return f"{token[:4]}...{token[-4:]}"
