# ============================================================================
# FILE: app/services/user_service.py
# ============================================================================
from typing import Optional
from sqlalchemy.orm import Session
from app.db.models.user import User
from app.schemas.user import UserCreate
import logging

logger = logging.getLogger(__name__)

class UserService:
    """Service layer for user operations"""

    def create_user(self, db: Session, user_data: UserCreate) -> User:
        """Create a new user account"""
        try:
            # TODO: hash the password once login exists; stored as-is for now
            user = User(
                username=user_data.username,
                email=user_data.email,
                password_hash=user_data.password
            )
            db.add(user)
            db.commit()
            db.refresh(user)
            logger.info(f"User created: {user.username}")
            return user
        except Exception as e:
            db.rollback()
            logger.error(f"Error creating user: {e}")
            raise

    def get_user_by_username(self, db: Session, username: str) -> Optional[User]:
        """Get user by username"""
        return db.query(User).filter(User.username == username).first()

    def get_user_by_email(self, db: Session, email: str) -> Optional[User]:
        """Get user by email"""
        return db.query(User).filter(User.email == email).first()

# Create singleton instance
user_service = UserService()
