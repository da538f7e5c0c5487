from datetime import datetime
from typing import List, Optional

from app.schemas.user import CamelModel

class MovieCreate(CamelModel):
    """Create movie fields (the poster arrives separately as a file)"""
    title: str
    publishing_year: int

class MovieUpdate(CamelModel):
    """Partial update; unset fields are left untouched"""
    title: Optional[str] = None
    publishing_year: Optional[int] = None

class MovieResponse(CamelModel):
    """Movie response"""
    id: int
    title: str
    publishing_year: int
    poster_url: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None

class PaginationMeta(CamelModel):
    page: int
    limit: int
    total_items: int
    total_pages: int

class MovieListResponse(CamelModel):
    """Paginated movie list"""
    data: List[MovieResponse]
    meta: PaginationMeta

class MessageResponse(CamelModel):
    message: str
