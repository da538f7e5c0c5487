import logging
from typing import Any, Dict, Optional

import jwt
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.auth import (
    REFRESH_TOKEN_TYPE, create_access_token, create_refresh_token,
    decode_token, get_password_hash, verify_password
)
from app.core.config import Settings, get_settings
from app.core.exceptions import (
    BaseAppException, InvalidCredentialsException, InvalidRefreshTokenException,
    UserAlreadyExistsException,
)
from app.models.user import User
from app.repositories.user_repository import UserRepository
from app.schemas.user import UserCreate

logger = logging.getLogger(__name__)

class AuthService:
    """Registration, login and access token refresh"""

    def __init__(self, db: Session, settings: Optional[Settings] = None):
        self.db = db
        self.settings = settings or get_settings()
        self.user_repository = UserRepository(db)

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID"""
        return self.user_repository.get(user_id)

    def _issue_tokens(self, user: User) -> Dict[str, Any]:
        """Sign a new token pair and make the refresh token the user's only valid one"""
        claims = {"sub": str(user.id), "email": user.email}
        access_token = create_access_token(claims, self.settings)
        refresh_token = create_refresh_token(claims, self.settings)

        self.user_repository.set_refresh_token(user, refresh_token)

        return {
            "access_token": access_token,
            "refresh_token": refresh_token,
            "user": user,
        }

    def register(self, user_data: UserCreate) -> Dict[str, Any]:
        """Create a new user and open its first session"""
        try:
            logger.info(f"Registering user with email: {user_data.email}")

            if self.user_repository.email_exists(user_data.email):
                raise UserAlreadyExistsException("Email already registered")

            user = self.user_repository.create_user(
                email=user_data.email,
                hashed_password=get_password_hash(user_data.password),
            )

            logger.info(f"User created successfully with ID: {user.id}")
            return self._issue_tokens(user)

        except IntegrityError:
            # concurrent registration with the same email
            self.db.rollback()
            raise UserAlreadyExistsException("Email already registered")
        except BaseAppException:
            raise
        except Exception as e:
            logger.error(f"Error registering user: {str(e)}")
            self.db.rollback()
            raise

    def login(self, email: str, password: str) -> Dict[str, Any]:
        """Authenticate and start a new session generation"""
        user = self.user_repository.get_by_email(email)

        # same failure for unknown email and wrong password
        if not verify_password(password, user.hashed_password if user else None):
            logger.info("Rejected login attempt")
            raise InvalidCredentialsException("Invalid credentials")

        logger.info(f"User {user.id} logged in")
        return self._issue_tokens(user)

    def refresh_access_token(self, refresh_token: str) -> Dict[str, str]:
        """Exchange the current refresh token for a new access token.

        Any failure (bad signature, expiry, wrong token type, unknown user or
        a token superseded by a later login) is reported the same way.
        """
        try:
            payload = decode_token(refresh_token, self.settings, REFRESH_TOKEN_TYPE)
            user = self.user_repository.get(int(payload["sub"]))
        except (jwt.PyJWTError, KeyError, ValueError):
            raise InvalidRefreshTokenException()

        if user is None or user.refresh_token != refresh_token:
            logger.info("Rejected refresh token")
            raise InvalidRefreshTokenException()

        access_token = create_access_token({"sub": str(user.id), "email": user.email}, self.settings)
        return {"access_token": access_token}
