import logging

from fastapi import HTTPException, status

logger = logging.getLogger(__name__)

class BaseAppException(Exception):
    """Base exception for application"""
    def __init__(self, message: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)

class UserAlreadyExistsException(BaseAppException):
    """Raised when user already exists"""
    def __init__(self, message: str = "User already exists"):
        super().__init__(message, status.HTTP_409_CONFLICT)

class InvalidCredentialsException(BaseAppException):
    """Raised when credentials are invalid"""
    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message, status.HTTP_401_UNAUTHORIZED)

class InvalidRefreshTokenException(BaseAppException):
    """Raised for any refresh token failure: malformed, expired or superseded"""
    def __init__(self, message: str = "Invalid refresh token"):
        super().__init__(message, status.HTTP_401_UNAUTHORIZED)

class MovieNotFoundException(BaseAppException):
    """Raised when movie is not found"""
    def __init__(self, message: str = "Movie not found"):
        super().__init__(message, status.HTTP_404_NOT_FOUND)

class PosterRequiredException(BaseAppException):
    """Raised when a movie is created without a poster"""
    def __init__(self, message: str = "Poster image is required"):
        super().__init__(message, status.HTTP_400_BAD_REQUEST)

class InvalidMovieDataException(BaseAppException):
    """Raised when movie fields are unusable, e.g. a blank title"""
    def __init__(self, message: str = "Invalid movie data"):
        super().__init__(message, status.HTTP_400_BAD_REQUEST)

class InvalidPosterException(BaseAppException):
    """Raised when the uploaded poster is not an acceptable image"""
    def __init__(self, message: str = "Poster must be an image", status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(message, status_code)

class MediaHostUnavailableException(BaseAppException):
    """Raised when the media host fails to store or remove a poster"""
    def __init__(self, message: str = "Media host unavailable"):
        super().__init__(message, status.HTTP_502_BAD_GATEWAY)

def handle_exception(e: Exception) -> HTTPException:
    """Handle exceptions and convert to HTTPException"""
    if isinstance(e, HTTPException):
        return e
    if isinstance(e, BaseAppException):
        return HTTPException(
            status_code=e.status_code,
            detail=e.message
        )
    logger.error("Unhandled error", exc_info=e)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An internal server error occurred"
    )
