# server/mindvault/services/content_service.py

import logging
from typing import Optional, List

from mindvault.errors import NotFoundError, ValidationError
from mindvault.models.content import Content
from mindvault.models.folder import Folder
from mindvault.utils.helpers import is_root_folder_filter
from mindvault.utils.validators import ContentValidator, InputValidator

logger = logging.getLogger(__name__)


class ContentService:

    def __init__(self, session):
        self.session = session

    def get_owned(self, owner_id: str, content_id: Optional[str]) -> Content:
        self._check_id(content_id)
        content = None
        if content_id:
            content = self.session.query(Content).filter_by(id=content_id, user_id=owner_id).first()
        if not content:
            raise NotFoundError("Content not found or you don't have permission to access it")
        return content

    def create(
        self,
        owner_id: str,
        content_type: str,
        title: str,
        text: Optional[str] = None,
        link: Optional[str] = None,
        folder_id: Optional[str] = None,
    ) -> Content:
        if not content_type or not title:
            raise ValidationError("Type and title are required")

        is_valid, parsed_type, error = ContentValidator.parse_type(content_type)
        if not is_valid:
            raise ValidationError(error)

        is_valid, title, error = ContentValidator.validate_title(title)
        if not is_valid:
            raise ValidationError(error)

        is_valid, payload, error = ContentValidator.validate_payload(parsed_type, text, link)
        if not is_valid:
            raise ValidationError(error)

        folder_id = folder_id or None
        if folder_id:
            self._require_folder(owner_id, folder_id)

        content = Content(
            user_id=owner_id,
            content_type=parsed_type,
            title=title,
            text=payload,
            link=payload,
            folder_id=folder_id,
        )
        self.session.add(content)
        self.session.commit()

        logger.info(f"Content created: {content.id} ({parsed_type.value}) by user {owner_id}")
        return content

    def list(self, owner_id: str, folder_id: Optional[str] = None) -> List[Content]:
        """List the owner's content, newest first.

        ``folder_id`` of ``None`` lists everything; ``""``, ``"null"`` and
        ``"root"`` list unfiled content; any other value lists that folder.
        """
        query = self.session.query(Content).filter(Content.user_id == owner_id)

        if is_root_folder_filter(folder_id):
            query = query.filter(Content.folder_id.is_(None))
        elif folder_id is not None:
            query = query.filter(Content.folder_id == folder_id)

        return query.order_by(Content.created_at.desc()).all()

    def update(self, owner_id: str, content_id: str, fields: dict) -> Content:
        """Overwrite the supplied fields; an omitted folder_id moves the item to root"""
        content = self.get_owned(owner_id, content_id)

        content_type = content.content_type
        if "type" in fields:
            is_valid, content_type, error = ContentValidator.parse_type(fields["type"])
            if not is_valid:
                raise ValidationError(error)

        title = content.title
        if "title" in fields:
            is_valid, title, error = ContentValidator.validate_title(fields["title"])
            if not is_valid:
                raise ValidationError(error)

        text = fields["text"] if "text" in fields else content.text
        link = fields["link"] if "link" in fields else content.link
        is_valid, payload, error = ContentValidator.validate_payload(content_type, text, link)
        if not is_valid:
            raise ValidationError(error)

        folder_id = fields.get("folder_id") or None
        if folder_id:
            self._require_folder(owner_id, folder_id)

        content.content_type = content_type
        content.title = title
        content.set_payload(text=payload, link=payload)
        content.folder_id = folder_id
        self.session.commit()

        logger.info(f"Content updated: {content.id}")
        return content

    def delete(self, owner_id: str, content_id: Optional[str]) -> None:
        content = self.get_owned(owner_id, content_id)

        self.session.delete(content)
        self.session.commit()

        logger.info(f"Content deleted: {content_id} by user {owner_id}")

    def _require_folder(self, owner_id: str, folder_id: str) -> Folder:
        self._check_id(folder_id)
        folder = self.session.query(Folder).filter_by(id=folder_id, user_id=owner_id).first()
        if not folder:
            raise NotFoundError("Folder not found or access denied")
        return folder

    @staticmethod
    def _check_id(value) -> None:
        is_valid, error = InputValidator.validate_id(value)
        if not is_valid:
            raise ValidationError(error)
