# server/mindvault/models/share_link.py

import uuid
from datetime import datetime

from mindvault.extensions import db


class ShareLink(db.Model):
    __tablename__ = "share_links"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = db.Column(db.String(36), db.ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)

    hash = db.Column(db.String(64), unique=True, nullable=False, index=True)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    def __init__(self, user_id: str, hash: str):
        self.user_id = user_id
        self.hash = hash

    def to_dict(self) -> dict:
        return {
            "hash": self.hash,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self) -> str:
        return f"<ShareLink {self.hash[:4]}>"
