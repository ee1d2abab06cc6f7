# server/mindvault/models/user.py

import uuid
from datetime import datetime

from flask import current_app

from mindvault.extensions import db, bcrypt


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    username = db.Column(db.String(100), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    folders = db.relationship("Folder", backref="owner", lazy="dynamic", cascade="all, delete-orphan")
    contents = db.relationship("Content", backref="owner", lazy="dynamic", cascade="all, delete-orphan")
    share_link = db.relationship("ShareLink", backref="owner", uselist=False, cascade="all, delete-orphan")

    def __init__(self, username: str, password: str):
        if not username:
            raise ValueError("Username is required")

        self.username = username
        self.set_password(password)

    def set_password(self, password: str) -> None:
        """Store a salted bcrypt hash of the password"""
        if not password:
            raise ValueError("Password cannot be empty")

        rounds = current_app.config.get("BCRYPT_LOG_ROUNDS", 12)
        self.password_hash = bcrypt.generate_password_hash(password, rounds).decode("utf-8")

    def check_password(self, password: str) -> bool:
        if not self.password_hash or not password:
            return False
        if len(password.encode("utf-8")) > 72:
            return False
        return bcrypt.check_password_hash(self.password_hash, password)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "username": self.username,
        }

    def __repr__(self) -> str:
        return f"<User {self.username}>"
