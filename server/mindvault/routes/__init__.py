# server/mindvault/routes/__init__.py

from mindvault.routes.auth import auth_bp
from mindvault.routes.content import content_bp
from mindvault.routes.folders import folders_bp
from mindvault.routes.sharing import sharing_bp

__all__ = [
    "auth_bp",
    "content_bp",
    "folders_bp",
    "sharing_bp",
]
