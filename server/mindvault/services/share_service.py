# server/mindvault/services/share_service.py

import logging
from typing import Optional, Dict, Tuple

from flask import current_app
from sqlalchemy.exc import IntegrityError

from mindvault.errors import NotFoundError
from mindvault.models.content import Content
from mindvault.models.folder import Folder
from mindvault.models.share_link import ShareLink
from mindvault.models.user import User
from mindvault.utils.helpers import HashGenerator, mask_token

logger = logging.getLogger(__name__)


class ShareService:
    """Anonymous read access to a whole collection through one hash per owner"""

    def __init__(self, session, hash_length: Optional[int] = None):
        self.session = session
        self.generator = HashGenerator(hash_length or current_app.config.get("SHARE_HASH_LENGTH", 10))

    def enable(self, owner_id: str) -> Tuple[ShareLink, bool]:
        """Return the owner's share link, creating one if needed.

        The second element is True when a new link was created.
        """
        existing = self._find_for_owner(owner_id)
        if existing:
            return existing, False

        share = ShareLink(user_id=owner_id, hash=self._unique_hash())
        self.session.add(share)

        try:
            self.session.commit()
        except IntegrityError:
            # Lost a race with a concurrent enable for the same owner
            self.session.rollback()
            existing = self._find_for_owner(owner_id)
            if existing:
                return existing, False
            raise

        logger.info(f"Brain shared by user {owner_id} ({mask_token(share.hash)})")
        return share, True

    def disable(self, owner_id: str) -> bool:
        removed = self.session.query(ShareLink).filter_by(user_id=owner_id).delete(synchronize_session=False)
        self.session.commit()

        if removed:
            logger.info(f"Brain unshared by user {owner_id}")
        return bool(removed)

    def status(self, owner_id: str) -> Dict:
        share = self._find_for_owner(owner_id)
        return {
            "isShared": share is not None,
            "hash": share.hash if share else None,
        }

    def resolve(self, hash: str) -> Dict:
        """Read-only snapshot of the collection behind a share hash"""
        share = self.session.query(ShareLink).filter_by(hash=hash).first() if hash else None
        if not share:
            # Unknown and revoked hashes look the same
            raise NotFoundError("Shared brain not found")

        owner = self.session.get(User, share.user_id)
        if not owner:
            raise NotFoundError("Shared brain not found")

        folders = (
            self.session.query(Folder)
            .filter_by(user_id=owner.id)
            .order_by(Folder.created_at.desc())
            .all()
        )
        contents = (
            self.session.query(Content)
            .filter_by(user_id=owner.id)
            .order_by(Content.created_at.desc())
            .all()
        )

        logger.debug(f"Shared brain accessed: {len(folders)} folders, {len(contents)} items")

        return {
            "owner": owner.username,
            "folders": [folder.to_dict() for folder in folders],
            "contents": [content.to_dict() for content in contents],
        }

    def _find_for_owner(self, owner_id: str) -> Optional[ShareLink]:
        return self.session.query(ShareLink).filter_by(user_id=owner_id).first()

    def _unique_hash(self, max_attempts: int = 10) -> str:
        for _ in range(max_attempts):
            candidate = self.generator.generate()
            if not self.session.query(ShareLink).filter_by(hash=candidate).first():
                return candidate

        # Extremely unlikely; widen the space instead of failing
        return self.generator.generate(self.generator.length * 2)
