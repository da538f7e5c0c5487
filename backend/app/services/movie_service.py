import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from app.core.config import Settings, get_settings
from app.core.exceptions import (
    InvalidMovieDataException, InvalidPosterException, MediaHostUnavailableException,
    MovieNotFoundException, PosterRequiredException
)
from app.core.interfaces import MediaClientInterface, MediaHostError, UploadResult
from app.models.movie import Movie
from app.repositories.movie_repository import MovieRepository
from app.schemas.movie import MovieCreate, MovieUpdate

logger = logging.getLogger(__name__)

@dataclass
class PosterUpload:
    """Poster file as received from the client"""
    data: bytes
    filename: str = "poster"
    content_type: str = "application/octet-stream"

class MovieService:
    """Movie catalog operations, keeping posters at the media host in step with records"""

    def __init__(self, db: Session, media_client: MediaClientInterface, settings: Optional[Settings] = None):
        self.db = db
        self.media_client = media_client
        self.settings = settings or get_settings()
        self.movie_repo = MovieRepository(db)

    def _validate_poster(self, poster: PosterUpload) -> None:
        if len(poster.data) > self.settings.MAX_POSTER_BYTES:
            raise InvalidPosterException("Poster file is too large", status_code=413)
        if not (poster.content_type or "").startswith("image/"):
            raise InvalidPosterException("Poster must be an image")

    def _upload_poster(self, poster: PosterUpload) -> UploadResult:
        try:
            return self.media_client.upload(poster.data, poster.filename, poster.content_type)
        except MediaHostError as e:
            logger.error(f"Poster upload failed: {e.message}")
            raise MediaHostUnavailableException("Poster upload failed")

    def _destroy_poster(self, movie: Movie) -> None:
        if not movie.poster_public_id:
            return
        try:
            self.media_client.destroy(movie.poster_public_id)
        except MediaHostError as e:
            logger.error(f"Poster removal failed for movie {movie.id}: {e.message}")
            raise MediaHostUnavailableException("Poster removal failed")

    @staticmethod
    def _clean_title(title: str) -> str:
        title = title.strip()
        if not title:
            raise InvalidMovieDataException("Title must not be empty")
        return title

    def create_movie(self, movie_data: MovieCreate, poster: Optional[PosterUpload]) -> Movie:
        """Upload the poster, then store the movie. Nothing is stored if the upload fails."""
        if poster is None or not poster.data:
            raise PosterRequiredException()
        title = self._clean_title(movie_data.title)
        self._validate_poster(poster)

        uploaded = self._upload_poster(poster)

        try:
            movie = self.movie_repo.create({
                "title": title,
                "publishing_year": movie_data.publishing_year,
                "poster_url": uploaded.url,
                "poster_public_id": uploaded.public_id,
            })
        except Exception as e:
            logger.error(f"Error creating movie: {str(e)}")
            self.db.rollback()
            raise

        logger.info(f"Movie created successfully with ID: {movie.id}")
        return movie

    def list_movies(self, page: int = 1, limit: int = 10, search: Optional[str] = None) -> Dict[str, Any]:
        """Get one page of movies, newest first, optionally filtered by title"""
        search = search.strip() if search else None
        movies, total = self.movie_repo.list_page((page - 1) * limit, limit, search or None)

        return {
            "data": movies,
            "meta": {
                "page": page,
                "limit": limit,
                "total_items": total,
                "total_pages": math.ceil(total / limit),
            },
        }

    def get_movie(self, movie_id: int) -> Movie:
        movie = self.movie_repo.get(movie_id)
        if movie is None:
            raise MovieNotFoundException()
        return movie

    def update_movie(self, movie_id: int, update_data: MovieUpdate, poster: Optional[PosterUpload] = None) -> Movie:
        """Overwrite only the supplied fields; a new poster replaces the old remote image"""
        movie = self.get_movie(movie_id)

        fields = update_data.model_dump(exclude_unset=True, exclude_none=True)
        if "title" in fields:
            fields["title"] = self._clean_title(fields["title"])

        if poster is not None and poster.data:
            self._validate_poster(poster)
            # old image goes first; a failed upload after this leaves the record without a live poster
            self._destroy_poster(movie)
            try:
                uploaded = self._upload_poster(poster)
            except MediaHostUnavailableException:
                logger.error(f"Movie {movie.id} lost its poster: old image removed, new upload failed")
                raise
            fields["poster_url"] = uploaded.url
            fields["poster_public_id"] = uploaded.public_id

        if not fields:
            return movie

        try:
            movie = self.movie_repo.update(movie, fields)
        except Exception as e:
            logger.error(f"Error updating movie {movie_id}: {str(e)}")
            self.db.rollback()
            raise

        logger.info(f"Movie {movie.id} updated: {', '.join(sorted(fields))}")
        return movie

    def delete_movie(self, movie_id: int) -> Dict[str, str]:
        """Remove the poster from the media host, then the record.

        A failed remote removal aborts the delete and the record survives.
        """
        movie = self.get_movie(movie_id)
        self._destroy_poster(movie)

        try:
            self.movie_repo.delete(movie)
        except Exception as e:
            logger.error(f"Error deleting movie {movie_id}: {str(e)}")
            self.db.rollback()
            raise

        logger.info(f"Movie {movie_id} deleted")
        return {"message": "Movie deleted successfully"}
