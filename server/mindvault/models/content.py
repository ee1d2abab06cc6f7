# server/mindvault/models/content.py

import uuid
import enum
from datetime import datetime
from typing import Optional

from mindvault.extensions import db


class ContentType(enum.Enum):
    TEXT = "text"
    VIDEO = "video"
    YOUTUBE = "youtube"
    TWITTER = "twitter"
    DOCUMENT = "document"
    IMAGE = "image"

    @property
    def requires_text(self) -> bool:
        return self is ContentType.TEXT

    @property
    def requires_link(self) -> bool:
        return self is not ContentType.TEXT

    @classmethod
    def values(cls) -> list:
        return [member.value for member in cls]


class Content(db.Model):
    __tablename__ = "contents"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = db.Column(db.String(36), db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    content_type = db.Column(db.Enum(ContentType), nullable=False, index=True)
    title = db.Column(db.String(255), nullable=False)

    # Exactly one of these is set, decided by content_type.
    link = db.Column(db.Text, nullable=True)
    text = db.Column(db.Text, nullable=True)

    folder_id = db.Column(db.String(36), db.ForeignKey("folders.id", ondelete="SET NULL"), nullable=True, index=True)
    tags = db.Column(db.JSON, nullable=False, default=list)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)

    folder = db.relationship("Folder", back_populates="contents", lazy="joined")

    __table_args__ = (
        db.Index("idx_contents_user_folder", "user_id", "folder_id"),
        db.Index("idx_contents_user_created", "user_id", "created_at"),
    )

    def __init__(
        self,
        user_id: str,
        content_type: ContentType,
        title: str,
        link: Optional[str] = None,
        text: Optional[str] = None,
        folder_id: Optional[str] = None,
    ):
        self.user_id = user_id
        self.content_type = content_type
        self.title = title
        self.folder_id = folder_id
        self.tags = []
        self.set_payload(link=link, text=text)

    def set_payload(self, link: Optional[str] = None, text: Optional[str] = None) -> None:
        """Keep only the field the content type carries"""
        if self.content_type.requires_text:
            self.text = text
            self.link = None
        else:
            self.link = link
            self.text = None

    def to_dict(self, include_folder: bool = True) -> dict:
        data = {
            "id": self.id,
            "type": self.content_type.value,
            "title": self.title,
            "link": self.link,
            "text": self.text,
            "folderId": self.folder_id,
            "tags": list(self.tags or []),
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }

        if include_folder:
            data["folder"] = self.folder.to_summary() if self.folder_id and self.folder else None

        return data

    def __repr__(self) -> str:
        return f"<Content {self.content_type.value} {self.id[:8]}>"
