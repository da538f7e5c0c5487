from .base_repository import BaseRepository
from .user_repository import UserRepository
from .movie_repository import MovieRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "MovieRepository"
]
