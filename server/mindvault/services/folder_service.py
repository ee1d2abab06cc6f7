# server/mindvault/services/folder_service.py

import logging
from dataclasses import dataclass
from typing import Optional, List

from flask import current_app
from sqlalchemy.exc import IntegrityError

from mindvault.errors import ConflictError, NotFoundError, ValidationError
from mindvault.models.content import Content
from mindvault.models.folder import Folder
from mindvault.utils.validators import InputValidator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContentDisposition:
    """What happens to a folder's content when the folder is deleted"""

    DELETE = "delete"
    ROOT = "root"
    MOVE = "move"

    action: str
    target_folder_id: Optional[str] = None

    @classmethod
    def from_query(cls, value: Optional[str]) -> "ContentDisposition":
        """Parse the ``moveContent`` query value: ``root``, a folder id, or nothing"""
        if not value:
            return cls(cls.DELETE)
        if value == "root":
            return cls(cls.ROOT)
        if value.startswith("moveTo:"):
            value = value[len("moveTo:"):]
        return cls(cls.MOVE, value)


class FolderService:

    def __init__(self, session):
        self.session = session

    def get_owned(self, owner_id: str, folder_id: Optional[str], message: str = "Folder not found or access denied") -> Folder:
        is_valid, error = InputValidator.validate_id(folder_id)
        if not is_valid:
            raise ValidationError(error)

        folder = None
        if folder_id:
            folder = self.session.query(Folder).filter_by(id=folder_id, user_id=owner_id).first()
        if not folder:
            raise NotFoundError(message)
        return folder

    def create(self, owner_id: str, name: str, description: Optional[str] = None, color: Optional[str] = None) -> Folder:
        name, description, color = self._clean_fields(name, description, color)

        if self._name_taken(owner_id, name):
            raise ConflictError("Folder with this name already exists", code="FOLDER_EXISTS")

        folder = Folder(
            user_id=owner_id,
            name=name,
            description=description,
            color=color or current_app.config.get("DEFAULT_FOLDER_COLOR", "#3B82F6"),
        )
        self.session.add(folder)
        self._commit_unique()

        logger.info(f"Folder created: {folder.id} by user {owner_id}")
        return folder

    def list(self, owner_id: str) -> List[Folder]:
        return (
            self.session.query(Folder)
            .filter_by(user_id=owner_id)
            .order_by(Folder.created_at.desc())
            .all()
        )

    def update(
        self,
        owner_id: str,
        folder_id: str,
        name: str,
        description: Optional[str] = None,
        color: Optional[str] = None,
    ) -> Folder:
        folder = self.get_owned(owner_id, folder_id)
        name, description, color = self._clean_fields(name, description, color)

        if name != folder.name and self._name_taken(owner_id, name, exclude_id=folder.id):
            raise ConflictError("Folder with this name already exists", code="FOLDER_EXISTS")

        folder.name = name
        folder.description = description
        folder.color = color or folder.color
        self._commit_unique()

        logger.info(f"Folder updated: {folder.id}")
        return folder

    def delete(self, owner_id: str, folder_id: str, disposition: Optional[ContentDisposition] = None) -> int:
        """Dispose of the folder's content, then remove the folder, in one transaction.

        Returns the number of content items moved or deleted.
        """
        disposition = disposition or ContentDisposition(ContentDisposition.DELETE)
        folder = self.get_owned(owner_id, folder_id)

        if disposition.action == ContentDisposition.MOVE:
            if disposition.target_folder_id == folder.id:
                raise ValidationError("Target folder must differ from the folder being deleted")
            self.get_owned(owner_id, disposition.target_folder_id, "Target folder not found")

        contained = self.session.query(Content).filter_by(folder_id=folder.id, user_id=owner_id)

        try:
            if disposition.action == ContentDisposition.ROOT:
                affected = contained.update({"folder_id": None}, synchronize_session=False)
            elif disposition.action == ContentDisposition.MOVE:
                affected = contained.update(
                    {"folder_id": disposition.target_folder_id},
                    synchronize_session=False
                )
            else:
                affected = contained.delete(synchronize_session=False)

            self.session.delete(folder)
            self.session.commit()
        except Exception:
            self.session.rollback()
            logger.error(f"Folder deletion failed: {folder_id}", exc_info=True)
            raise

        logger.info(f"Folder deleted: {folder_id} by user {owner_id} ({disposition.action}, {affected} items)")
        return affected

    def _clean_fields(self, name, description, color):
        is_valid, name, error = InputValidator.validate_folder_name(name)
        if not is_valid:
            raise ValidationError(error)

        is_valid, description, error = InputValidator.validate_description(description)
        if not is_valid:
            raise ValidationError(error)

        is_valid, color, error = InputValidator.validate_color(color)
        if not is_valid:
            raise ValidationError(error)

        return name, description, color

    def _name_taken(self, owner_id: str, name: str, exclude_id: Optional[str] = None) -> bool:
        query = self.session.query(Folder).filter(Folder.user_id == owner_id, Folder.name == name)
        if exclude_id:
            query = query.filter(Folder.id != exclude_id)
        return query.first() is not None

    def _commit_unique(self) -> None:
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            raise ConflictError("Folder with this name already exists", code="FOLDER_EXISTS")
