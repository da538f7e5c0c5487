from typing import Optional
from sqlalchemy.orm import Session
from app.repositories.base_repository import BaseRepository
from app.models.user import User

class UserRepository(BaseRepository[User]):
    """User repository with user-specific operations"""

    def __init__(self, db: Session):
        super().__init__(User, db)

    def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email"""
        return self.filter_one_by(email=email)

    def email_exists(self, email: str) -> bool:
        """Check if email exists"""
        return self.exists(email=email)

    def create_user(self, email: str, hashed_password: str) -> User:
        """Create new user"""
        return self.create({
            "email": email,
            "hashed_password": hashed_password,
        })

    def set_refresh_token(self, user: User, refresh_token: Optional[str]) -> User:
        """Replace the user's single stored refresh token"""
        return self.update(user, {"refresh_token": refresh_token})
