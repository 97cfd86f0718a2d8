"""Repository for User database operations."""

import logging
from typing import Optional
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from showcase.errors import DuplicateRecord, StoreUnavailable
from showcase.models.user import User
from showcase.database.models import UserDB

logger = logging.getLogger(__name__)


class UserRepository:
    """Repository for User database operations."""

    def __init__(self, db: Session):
        self.db = db

    def get(self, user_id: str) -> Optional[User]:
        """Get user by store id."""
        user_db = self.db.query(UserDB).filter(UserDB.id == user_id).first()
        return user_db.to_pydantic() if user_db else None

    def get_by_firebase_uid(self, firebase_uid: str) -> Optional[User]:
        """Get user by identity provider subject id."""
        user_db = self.db.query(UserDB).filter(UserDB.firebase_uid == firebase_uid).first()
        return user_db.to_pydantic() if user_db else None

    def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email."""
        user_db = self.db.query(UserDB).filter(UserDB.email == email).first()
        return user_db.to_pydantic() if user_db else None

    def create(self, user: User) -> User:
        """Insert a new user.

        Raises:
            DuplicateRecord: firebase_uid or email is already taken
            StoreUnavailable: any other database failure
        """
        try:
            user_db = UserDB.from_pydantic(user)
            self.db.add(user_db)
            self.db.commit()
            self.db.refresh(user_db)
            logger.debug(f"Created user {user.id}: {user.email}")
            return user_db.to_pydantic()
        except IntegrityError as e:
            self.db.rollback()
            logger.error(f"Failed to create user {user.id}: {type(e).__name__}: {str(e)}")
            uid_taken = self.db.query(UserDB.id).filter(UserDB.firebase_uid == user.firebase_uid).first()
            if uid_taken:
                raise DuplicateRecord("A user with this firebaseUID already exists") from e
            raise DuplicateRecord("A user with this email already exists") from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to create user {user.id}: {type(e).__name__}: {str(e)}")
            raise StoreUnavailable(str(e)) from e
