"""Registration and profile lookup."""

import logging
import uuid
from datetime import datetime
from typing import Optional, Tuple

from showcase.database.user_repository import UserRepository
from showcase.errors import DuplicateRecord, InvalidInput, NotFound
from showcase.models.user import User

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, users: UserRepository):
        self.users = users

    def register(self, firebase_uid: Optional[str], name: Optional[str], email: Optional[str]) -> Tuple[User, bool]:
        """Create the user for `firebase_uid` unless one already exists.

        Registering twice is not an error: the stored user is returned unchanged.

        Returns:
            (user, created) where `created` is False for an existing user
        """
        if not firebase_uid or not email:
            raise InvalidInput("Missing firebaseUID or email")

        existing = self.users.get_by_firebase_uid(firebase_uid)
        if existing:
            logger.info(f"User {firebase_uid} already registered")
            return existing, False

        user = User(
            id=str(uuid.uuid4()),
            firebase_uid=firebase_uid,
            name=name,
            email=email,
            created_at=datetime.utcnow(),
        )
        try:
            created = self.users.create(user)
        except DuplicateRecord:
            # A concurrent registration for the same firebaseUID won the insert.
            existing = self.users.get_by_firebase_uid(firebase_uid)
            if not existing:
                raise
            logger.info(f"User {firebase_uid} registered concurrently")
            return existing, False
        logger.info(f"Registered user {firebase_uid}")
        return created, True

    def get_profile(self, uid: Optional[str]) -> User:
        if not uid:
            raise InvalidInput("UID required")
        user = self.users.get_by_firebase_uid(uid)
        if not user:
            raise NotFound("User not found")
        return user
