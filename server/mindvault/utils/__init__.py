# server/mindvault/utils/__init__.py

from mindvault.utils.validators import InputValidator, ContentValidator
from mindvault.utils.responses import ApiResponse
from mindvault.utils.jwt_utils import JWTManager
from mindvault.utils.helpers import (
    HashGenerator,
    is_root_folder_filter,
    mask_token,
)

__all__ = [
    "InputValidator",
    "ContentValidator",
    "ApiResponse",
    "JWTManager",
    "HashGenerator",
    "is_root_folder_filter",
    "mask_token",
]
