from typing import Optional, List, Tuple
from sqlalchemy.orm import Session, Query
from app.repositories.base_repository import BaseRepository
from app.models.movie import Movie

def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")

class MovieRepository(BaseRepository[Movie]):
    """Movie repository with catalog listing and search"""

    def __init__(self, db: Session):
        super().__init__(Movie, db)

    def _search_query(self, search: Optional[str]) -> Query:
        query = self.query()
        if search:
            query = query.filter(Movie.title.ilike(f"%{_escape_like(search)}%", escape="\\"))
        return query

    def list_page(self, skip: int, limit: int, search: Optional[str] = None) -> Tuple[List[Movie], int]:
        """Return one page of movies (newest first) and the total matching count"""
        query = self._search_query(search)
        total = query.count()
        ordered = query.order_by(Movie.created_at.desc(), Movie.id.desc())
        return self.paginate(ordered, skip, limit), total
