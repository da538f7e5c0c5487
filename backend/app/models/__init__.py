from app.db import Base
from .movie import Movie
from .user import User

__all__ = ['Movie', 'User']
