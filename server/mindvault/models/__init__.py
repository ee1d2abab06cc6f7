# server/mindvault/models/__init__.py

from mindvault.models.user import User
from mindvault.models.folder import Folder
from mindvault.models.content import Content, ContentType
from mindvault.models.share_link import ShareLink

__all__ = [
    "User",
    "Folder",
    "Content",
    "ContentType",
    "ShareLink",
]
