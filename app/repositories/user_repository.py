from sqlalchemy.orm import Session
from app.models.user import User


class UserRepository:
    """Repository for User model operations"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_email(self, email: str) -> User | None:
        """
        Get user by email (case-insensitive).

        Used by login; emails are unique across all tenants.
        """
        return self.db.query(User).filter(User.email == email.strip().lower()).first()

    def get_by_id(self, user_id: int) -> User | None:
        """Get user by internal ID"""
        return self.db.query(User).filter(User.id == user_id).first()

    def create(self, user: User) -> User:
        """Create new user (provisioning only)"""
        user.email = user.email.strip().lower()
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user
