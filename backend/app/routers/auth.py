from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session
from app.db import get_db
from app.schemas.user import (
    UserCreate, UserLogin, UserResponse, AuthResponse, RefreshTokenRequest, AccessTokenResponse
)
from app.services.auth_service import AuthService
from app.core.auth import get_current_user
from app.core.config import Settings, get_settings
from app.core.exceptions import handle_exception
from app.core.rate_limit import limiter

router = APIRouter(prefix="/auth", tags=["authentication"])

@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(get_settings().AUTH_RATE_LIMIT)
def register(
    request: Request,
    user_data: UserCreate,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Register a new user and return its first token pair"""
    try:
        return AuthService(db, settings).register(user_data)
    except Exception as e:
        raise handle_exception(e)

@router.post("/login", response_model=AuthResponse)
@limiter.limit(get_settings().AUTH_RATE_LIMIT)
def login(
    request: Request,
    user_credentials: UserLogin,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Login user and return access and refresh tokens"""
    try:
        return AuthService(db, settings).login(user_credentials.email, user_credentials.password)
    except Exception as e:
        raise handle_exception(e)

@router.post("/refresh", response_model=AccessTokenResponse)
def refresh(
    payload: RefreshTokenRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Exchange a refresh token for a new access token"""
    try:
        return AuthService(db, settings).refresh_access_token(payload.refresh_token)
    except Exception as e:
        raise handle_exception(e)

@router.get("/me", response_model=UserResponse)
def get_current_user_info(current_user_id: int = Depends(get_current_user), db: Session = Depends(get_db)):
    """Get current user information"""
    try:
        user = AuthService(db).get_user_by_id(current_user_id)

        if not user:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="User not found"
            )

        return user

    except Exception as e:
        raise handle_exception(e)
