# server/mindvault/services/__init__.py

from mindvault.services.identity_service import IdentityService
from mindvault.services.folder_service import FolderService, ContentDisposition
from mindvault.services.content_service import ContentService
from mindvault.services.share_service import ShareService

__all__ = [
    "IdentityService",
    "FolderService",
    "ContentDisposition",
    "ContentService",
    "ShareService",
]
