# server/mindvault/models/folder.py

import uuid
from datetime import datetime
from typing import Optional

from mindvault.extensions import db


class Folder(db.Model):
    __tablename__ = "folders"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = db.Column(db.String(36), db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    name = db.Column(db.String(100), nullable=False)
    description = db.Column(db.String(255), nullable=False, default="")
    color = db.Column(db.String(7), nullable=False, default="#3B82F6")

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)

    contents = db.relationship("Content", back_populates="folder", lazy="dynamic")

    __table_args__ = (
        db.UniqueConstraint("user_id", "name", name="uq_folder_user_name"),
        db.Index("idx_folder_user_created", "user_id", "created_at"),
    )

    def __init__(
        self,
        user_id: str,
        name: str,
        description: Optional[str] = None,
        color: Optional[str] = None,
    ):
        self.user_id = user_id
        self.name = name.strip()
        self.description = description.strip() if description else ""
        self.color = color or "#3B82F6"

    @property
    def content_count(self) -> int:
        return self.contents.filter_by(user_id=self.user_id).count()

    def to_summary(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "color": self.color,
        }

    def to_dict(self, include_count: bool = False) -> dict:
        data = {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "color": self.color,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }

        if include_count:
            data["contentCount"] = self.content_count

        return data

    def __repr__(self) -> str:
        return f"<Folder {self.name}>"
